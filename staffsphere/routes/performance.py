from flask import Blueprint, jsonify

from ..auth.decorators import auth_required
from ..extensions import db
from ..models.employee import Employee
from ..models.performance import PerformanceCycle, PerformanceGoal, PerformanceReview
from ..schemas.performance import (
    CycleRequest,
    CycleResponse,
    GoalRequest,
    GoalResponse,
    ReviewRequest,
    ReviewResponse,
    ReviewStatusRequest,
)
from ..utils.json_utils import to_json, to_json_list
from ..utils.request_utils import parse_body

bp = Blueprint("performance", __name__, url_prefix="/api/performance")


def _employee_missing(employee_id) -> bool:
    return employee_id is not None and db.session.get(Employee, employee_id) is None


# --- Cycles ---


@bp.get("/cycles")
@auth_required
def list_cycles():
    cycles = PerformanceCycle.query.order_by(PerformanceCycle.start_date.desc(), PerformanceCycle.id.desc()).all()
    return jsonify(to_json_list(CycleResponse, cycles))


@bp.post("/cycles")
@auth_required
def create_cycle():
    data = parse_body(CycleRequest)
    if data.end_date < data.start_date:
        return jsonify({"message": "Cycle end date cannot be before the start date."}), 400

    cycle = PerformanceCycle(**data.model_dump(exclude_none=True))
    db.session.add(cycle)
    db.session.commit()

    return jsonify(to_json(CycleResponse.model_validate(cycle))), 201


@bp.delete("/cycles/<int:cycle_id>")
@auth_required
def delete_cycle(cycle_id: int):
    cycle = db.session.get(PerformanceCycle, cycle_id)
    if cycle is None:
        return jsonify({"message": "Cycle not found"}), 404

    db.session.delete(cycle)
    db.session.commit()
    return jsonify({"message": "Cycle deleted"})


# --- Goals ---


@bp.get("/goals")
@auth_required
def list_goals():
    goals = PerformanceGoal.query.order_by(PerformanceGoal.created_at.desc(), PerformanceGoal.id.desc()).all()
    return jsonify(to_json_list(GoalResponse, goals))


@bp.post("/goals")
@auth_required
def create_goal():
    data = parse_body(GoalRequest)
    if _employee_missing(data.employee_id):
        return jsonify({"message": "Employee not found."}), 404

    # Blank strings fall back to the column defaults
    fields = {key: value for key, value in data.model_dump(exclude_none=True).items() if value != ""}
    goal = PerformanceGoal(**fields)
    db.session.add(goal)
    db.session.commit()

    return jsonify(to_json(GoalResponse.model_validate(goal))), 201


@bp.delete("/goals/<int:goal_id>")
@auth_required
def delete_goal(goal_id: int):
    goal = db.session.get(PerformanceGoal, goal_id)
    if goal is None:
        return jsonify({"message": "Goal not found"}), 404

    db.session.delete(goal)
    db.session.commit()
    return jsonify({"message": "Goal deleted"})


# --- Reviews ---


def _get_review_or_none(review_id: int):
    return db.session.get(PerformanceReview, review_id)


def _review_not_found():
    return jsonify({"message": "Review not found"}), 404


@bp.get("/reviews")
@auth_required
def list_reviews():
    reviews = PerformanceReview.query.order_by(PerformanceReview.created_at.desc(), PerformanceReview.id.desc()).all()
    return jsonify(to_json_list(ReviewResponse, reviews))


@bp.post("/reviews")
@auth_required
def create_review():
    data = parse_body(ReviewRequest)
    if _employee_missing(data.employee_id):
        return jsonify({"message": "Employee not found."}), 404

    fields = {key: value for key, value in data.model_dump(exclude_none=True).items() if value != ""}
    review = PerformanceReview(**fields)
    db.session.add(review)
    db.session.commit()

    return jsonify(to_json(ReviewResponse.model_validate(review))), 201


@bp.get("/reviews/summary/<int:employee_id>")
@auth_required
def review_summary(employee_id: int):
    reviews = (
        PerformanceReview.query.filter(PerformanceReview.employee_id == employee_id)
        .order_by(PerformanceReview.created_at.desc(), PerformanceReview.id.desc())
        .all()
    )
    if not reviews:
        return jsonify({"message": "No reviews found for this employee"}), 404

    avg_rating = sum(review.rating for review in reviews) / len(reviews)
    return jsonify({"reviews": to_json_list(ReviewResponse, reviews), "avgRating": round(avg_rating, 2)})


@bp.get("/reviews/<int:review_id>")
@auth_required
def get_review(review_id: int):
    review = _get_review_or_none(review_id)
    if review is None:
        return _review_not_found()

    return jsonify(to_json(ReviewResponse.model_validate(review)))


@bp.put("/reviews/<int:review_id>")
@auth_required
def update_review(review_id: int):
    data = parse_body(ReviewRequest)

    review = _get_review_or_none(review_id)
    if review is None:
        return _review_not_found()

    if _employee_missing(data.employee_id):
        return jsonify({"message": "Employee not found."}), 404

    for key, value in data.model_dump(exclude_none=True).items():
        setattr(review, key, value)
    db.session.commit()

    return jsonify(to_json(ReviewResponse.model_validate(review)))


@bp.delete("/reviews/<int:review_id>")
@auth_required
def delete_review(review_id: int):
    review = _get_review_or_none(review_id)
    if review is None:
        return _review_not_found()

    db.session.delete(review)
    db.session.commit()
    return jsonify({"message": "Review deleted"})


@bp.post("/reviews/<int:review_id>/acknowledge")
@auth_required
def acknowledge_review(review_id: int):
    review = _get_review_or_none(review_id)
    if review is None:
        return _review_not_found()

    review.acknowledge()
    db.session.commit()

    return jsonify({"message": "Review acknowledged", "review": to_json(ReviewResponse.model_validate(review))})


@bp.patch("/reviews/<int:review_id>/status")
@auth_required
def update_review_status(review_id: int):
    data = parse_body(ReviewStatusRequest)

    review = _get_review_or_none(review_id)
    if review is None:
        return _review_not_found()

    review.status = data.status
    db.session.commit()

    return jsonify(to_json(ReviewResponse.model_validate(review)))
