import re
from datetime import date, datetime
from decimal import Decimal, InvalidOperation

DATE_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}$")

# Column order used by every SELECT that decodes a full record
COLUMNS = ("Emp_ID", "Name", "Department", "Salary", "Join_Date", "Email", "Phone")


class ValidationError(ValueError):
    """Raised when a value typed by the user cannot be stored."""


def parse_salary(text, required=False):
    """Return the salary as a Decimal, None for blank input.

    Raises ValidationError for anything that is not a finite number, and for
    blank input when required.
    """
    text = text.strip()
    if not text:
        if required:
            raise ValidationError("Invalid salary amount!")
        return None
    try:
        value = Decimal(text)
    except InvalidOperation:
        raise ValidationError("Invalid salary amount!")
    if not value.is_finite():
        raise ValidationError("Invalid salary amount!")
    return value


def parse_join_date(text, required=False):
    """Return the join date as a date, None for blank input unless required."""
    text = text.strip()
    if not text:
        if required:
            raise ValidationError("Invalid date format! Use YYYY-MM-DD")
        return None
    if not DATE_PATTERN.match(text):
        raise ValidationError("Invalid date format! Use YYYY-MM-DD")
    try:
        return datetime.strptime(text, "%Y-%m-%d").date()
    except ValueError:
        # Right shape, impossible day (2023-02-30)
        raise ValidationError("Invalid date format! Use YYYY-MM-DD")


def optional_text(text):
    text = text.strip()
    return text or None


def format_salary(value, currency):
    if value is None:
        return "N/A"
    return f"{currency}{Decimal(value):.2f}"


def format_date(value):
    return value.isoformat() if value is not None else "N/A"


def cell(value, width, cut=False):
    """Pad value to width; with cut, keep at most width - 1 characters"""
    text = "N/A" if value is None else str(value)
    if cut:
        text = text[:width - 1]
    return text.ljust(width)


class Employee:
    """One row of the Employee table"""

    def __init__(self, emp_id=None, name="", department=None, salary=None,
                 join_date=None, email=None, phone=None):
        self.emp_id = emp_id            # Assigned by the database on insert
        self.name = name                # Never empty once stored
        self.department = department
        self.salary = salary            # Decimal or None
        self.join_date = join_date      # date or None
        self.email = email
        self.phone = phone

    @classmethod
    def from_row(cls, row):
        """Decode a driver row (in COLUMNS order) into an Employee.

        MySQL hands back Decimal and date objects, SQLite hands back float
        and text; both end up as Decimal and date here.
        """
        emp_id, name, department, salary, join_date, email, phone = row
        if salary is not None and not isinstance(salary, Decimal):
            salary = Decimal(str(salary))
        if isinstance(join_date, datetime):
            join_date = join_date.date()
        elif isinstance(join_date, str):
            join_date = date.fromisoformat(join_date) if join_date else None
        return cls(
            emp_id=int(emp_id),
            name=name,
            department=department or None,
            salary=salary,
            join_date=join_date,
            email=email or None,
            phone=phone or None,
        )

    def to_params(self):
        """Values for the six editable columns, in INSERT/UPDATE order"""
        return (
            self.name,
            self.department,
            self.salary,
            self.join_date,
            self.email,
            self.phone,
        )

    def get_full_info(self):
        """Return all employee data as dictionary"""
        return {
            'emp_id': self.emp_id,
            'name': self.name,
            'department': self.department,
            'salary': self.salary,
            'join_date': self.join_date,
            'email': self.email,
            'phone': self.phone,
        }

    def display(self):
        """Print the record one field per line"""
        print(f"ID: {self.emp_id}")
        print(f"Name: {self.name}")
        print(f"Department: {self.department or 'N/A'}")
        print(f"Salary: {self.salary if self.salary is not None else 'N/A'}")
        print(f"Join Date: {format_date(self.join_date)}")
        print(f"Email: {self.email or 'N/A'}")
        print(f"Phone: {self.phone or 'N/A'}")

    def __eq__(self, other):
        if not isinstance(other, Employee):
            return NotImplemented
        return self.get_full_info() == other.get_full_info()

    def __repr__(self):
        return f"Employee(emp_id={self.emp_id!r}, name={self.name!r})"
