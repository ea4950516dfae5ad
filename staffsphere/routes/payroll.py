from flask import Blueprint, current_app, jsonify

from ..auth.decorators import auth_required, role_required
from ..auth.helpers import get_current_user_id
from ..enums.role import Role
from ..extensions import db
from ..models.employee import Employee
from ..models.payroll import Payroll, compute_net_pay
from ..schemas.payroll import PayrollRequest, PayrollResponse
from ..utils.json_utils import to_json, to_json_list
from ..utils.request_utils import parse_body

bp = Blueprint("payroll", __name__, url_prefix="/api/payroll")


@bp.get("/")
@auth_required
def list_payroll():
    payrolls = Payroll.query.order_by(Payroll.created_at.desc(), Payroll.id.desc()).all()
    return jsonify(to_json_list(PayrollResponse, payrolls))


@bp.post("/")
@role_required(Role.HR)
def create_payroll():
    data = parse_body(PayrollRequest)
    if data.employee_id is None or not data.month or data.basic_pay is None:
        return jsonify({"message": "Employee, month and basic pay are required."}), 400

    employee = db.session.get(Employee, data.employee_id)
    if employee is None:
        return jsonify({"message": "Employee not found."}), 404

    deductions = data.deductions or 0
    payroll = Payroll(
        employee_id=employee.id,
        employee_name=employee.name,
        month=data.month,
        basic_pay=data.basic_pay,
        deductions=deductions,
        net_pay=compute_net_pay(data.basic_pay, deductions, data.net_pay),
    )
    if data.status is not None:
        payroll.status = data.status
    payroll.touch(get_current_user_id())

    db.session.add(payroll)
    db.session.commit()

    current_app.logger.info(f"Payroll {payroll.id} created for employee {employee.id} ({payroll.month})")
    return jsonify(to_json(PayrollResponse.model_validate(payroll))), 201


@bp.put("/<int:payroll_id>")
@role_required(Role.HR)
def update_payroll(payroll_id: int):
    data = parse_body(PayrollRequest)

    payroll = db.session.get(Payroll, payroll_id)
    if payroll is None:
        return jsonify({"message": "Payroll not found"}), 404

    fields = data.model_dump(exclude_none=True)
    if "employee_id" in fields:
        employee = db.session.get(Employee, fields["employee_id"])
        if employee is None:
            return jsonify({"message": "Employee not found."}), 404
        payroll.employee_name = employee.name

    for key, value in fields.items():
        setattr(payroll, key, value)

    # Keep the net pay consistent when only its inputs change
    if "net_pay" not in fields and ("basic_pay" in fields or "deductions" in fields):
        payroll.net_pay = compute_net_pay(payroll.basic_pay, payroll.deductions)

    payroll.touch(get_current_user_id())
    db.session.commit()

    return jsonify(to_json(PayrollResponse.model_validate(payroll)))


@bp.patch("/<int:payroll_id>/approve")
@role_required(Role.HR)
def approve_payroll(payroll_id: int):
    payroll = db.session.get(Payroll, payroll_id)
    if payroll is None:
        return jsonify({"message": "Payroll not found"}), 404

    payroll.approve().touch(get_current_user_id())
    db.session.commit()

    current_app.logger.info(f"Payroll {payroll.id} approved by user {get_current_user_id()}")
    return jsonify({"message": "Payroll approved", "payroll": to_json(PayrollResponse.model_validate(payroll))})


@bp.delete("/<int:payroll_id>")
@role_required(Role.HR)
def delete_payroll(payroll_id: int):
    payroll = db.session.get(Payroll, payroll_id)
    if payroll is None:
        return jsonify({"message": "Payroll not found"}), 404

    db.session.delete(payroll)
    db.session.commit()
    return jsonify({"message": "Payroll deleted"})
