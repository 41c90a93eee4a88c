import logging
from datetime import date, datetime

from django.contrib.auth import get_user_model
from django.db import transaction
from django.utils.dateparse import parse_date, parse_datetime

from employees.models import Employee

from .exceptions import Conflict
from .models import SystemRole
from .rbac import assign_roles

logger = logging.getLogger(__name__)

DEFAULT_EMPLOYEE_ROLES = [SystemRole.DEPARTMENT_EMPLOYEE]


def _coerce_date(value):
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    parsed = parse_datetime(value)
    if parsed:
        return parsed.date()
    return parse_date(value)


def register_employee(payload: dict):
    """Create a login identity and employee profile for a new hire.

    ``payload`` carries ``employee_number``, ``work_email``, ``password``,
    ``first_name``, ``last_name``, ``national_id`` and ``date_of_hire``, plus
    optional ``middle_name``, ``personal_email``, ``mobile_phone`` and
    ``roles``. Returns the id of the created ``Employee``.
    """
    employee_number = payload["employee_number"]
    work_email = payload["work_email"]
    national_id = payload["national_id"]
    logger.info("Registration attempt: %s %s", employee_number, work_email)

    if Employee.objects.filter(employee_number=employee_number).exists():
        raise Conflict("Employee number already exists")
    User = get_user_model()
    if (
        Employee.objects.filter(work_email__iexact=work_email).exists()
        or User.objects.filter(email__iexact=work_email).exists()
    ):
        raise Conflict("Email already exists")
    if Employee.objects.filter(national_id=national_id).exists():
        raise Conflict("National ID already exists")

    with transaction.atomic():
        user = User.objects.create_user(
            email=work_email,
            password=payload["password"],
            first_name=payload["first_name"],
            last_name=payload["last_name"],
            is_employee=True,
        )
        employee = Employee.objects.create(
            user=user,
            employee_number=employee_number,
            work_email=work_email,
            personal_email=payload.get("personal_email"),
            mobile_phone=payload.get("mobile_phone"),
            first_name=payload["first_name"],
            middle_name=payload.get("middle_name"),
            last_name=payload["last_name"],
            national_id=national_id,
            date_of_hire=_coerce_date(payload["date_of_hire"]),
            status=Employee.STATUS_ACTIVE,
        )
        assign_roles(user, payload.get("roles") or DEFAULT_EMPLOYEE_ROLES)

    logger.info("Employee created: %s %s", employee.id, employee.full_name)
    return employee.id
