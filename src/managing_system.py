import logging

from database import DatabaseError
from employee import (
    Employee,
    ValidationError,
    cell,
    format_date,
    format_salary,
    optional_text,
    parse_join_date,
    parse_salary,
)

logger = logging.getLogger(__name__)

RULE = "=" * 60


def shown(value):
    # Current value inside an edit prompt; blank when unset
    return "" if value is None else value


def banner(title):
    print("\n" + RULE)
    print(title)
    print(RULE)


class ManagingSystem:
    """Menu operations over the Employee table.

    Every operation receives the session's Database and reads its answers
    through self.prompt, which is the builtin input unless a caller swaps it.
    """

    def __init__(self, prompt=input, currency="₹"):
        self.prompt = prompt
        self.currency = currency

    def ask(self, label):
        return self.prompt(label).strip()

    def ask_id(self, label):
        """Return the typed ID as int, or None (after saying so) if it is not a number"""
        raw = self.ask(label)
        # Plain ASCII decimal only; int() alone would take "1_0" or "١"
        if raw.isascii() and raw.lstrip("+-").isdigit():
            try:
                return int(raw)
            except ValueError:
                pass
        print("✗ Invalid Employee ID!")
        return None

    def display_menu(self):
        """Display main system menu"""
        banner("EMPLOYEE MANAGEMENT SYSTEM - MAIN MENU")
        print("1. Add Employee")
        print("2. Delete Employee")
        print("3. Edit Employee")
        print("4. Display All Employees")
        print("5. Search Employee")
        print("6. View Statistics")
        print("7. Exit")
        print(RULE)

    def add_employee(self, db):
        """Collect a new employee and insert it; any invalid field aborts with no write"""
        banner("ADD NEW EMPLOYEE")
        try:
            name = self.ask("Enter Name: ")
            if not name:
                print("✗ Name cannot be empty!")
                return None

            department = optional_text(self.prompt("Enter Department: "))
            salary = parse_salary(self.prompt("Enter Salary: "), required=True)
            join_date = parse_join_date(
                self.prompt("Enter Join Date (YYYY-MM-DD): "), required=True
            )
            email = optional_text(self.prompt("Enter Email: "))
            phone = optional_text(self.prompt("Enter Phone: "))
        except ValidationError as e:
            print(f"✗ {e}")
            return None

        employee = Employee(
            name=name,
            department=department,
            salary=salary,
            join_date=join_date,
            email=email,
            phone=phone,
        )
        try:
            emp_id = db.add_employee(employee)
        except DatabaseError as e:
            print(f"✗ Error adding employee: {e}")
            return None

        print("\n" + RULE)
        print(f"✓ Employee '{name}' added successfully!")
        print(f"✓ Employee ID: {emp_id}")
        print(RULE)
        return emp_id

    def delete_employee(self, db):
        """Delete one employee after an explicit "yes"; returns True if a row went"""
        banner("DELETE EMPLOYEE")
        emp_id = self.ask_id("Enter Employee ID to delete: ")
        if emp_id is None:
            return False

        try:
            employee = db.fetch_employee_by_id(emp_id)
            if employee is None:
                print(f"\n✗ Employee with ID {emp_id} not found")
                return False

            print("\nEmployee Details:")
            print(f"ID: {employee.emp_id}")
            print(f"Name: {employee.name}")
            print(f"Department: {employee.department or 'N/A'}")

            confirm = self.prompt("\nAre you sure you want to delete this employee? (yes/no): ")
            if confirm.lower() != "yes":
                print("\n✓ Deletion cancelled")
                return False

            db.delete_employee(emp_id)
        except DatabaseError as e:
            print(f"✗ Error deleting employee: {e}")
            return False

        print("\n" + RULE)
        print(f"✓ Employee '{employee.name}' deleted successfully!")
        print(RULE)
        return True

    def edit_employee(self, db):
        """Update existing employee record"""
        banner("EDIT EMPLOYEE")
        emp_id = self.ask_id("Enter Employee ID to edit: ")
        if emp_id is None:
            return False

        try:
            employee = db.fetch_employee_by_id(emp_id)
            if employee is None:
                print(f"\n✗ Employee with ID {emp_id} not found")
                return False

            print("\nCurrent Details:")
            print("-" * 60)
            employee.display()
            print("-" * 60)
            print("\nEnter new details (press Enter to keep current value):")

            employee.name = self.ask(f"Name [{employee.name}]: ") or employee.name
            employee.department = (
                self.ask(f"Department [{shown(employee.department)}]: ") or employee.department
            )

            salary_input = self.ask(f"Salary [{shown(employee.salary)}]: ")
            if salary_input:
                try:
                    employee.salary = parse_salary(salary_input)
                except ValidationError:
                    print("✗ Invalid salary amount! Keeping original salary")

            date_input = self.ask(f"Join Date [{format_date(employee.join_date)}]: ")
            if date_input:
                try:
                    employee.join_date = parse_join_date(date_input)
                except ValidationError:
                    print("✗ Invalid date format! Keeping original date")

            employee.email = self.ask(f"Email [{shown(employee.email)}]: ") or employee.email
            employee.phone = self.ask(f"Phone [{shown(employee.phone)}]: ") or employee.phone

            db.update_employee(employee)
        except DatabaseError as e:
            print(f"✗ Error updating employee: {e}")
            return False

        print("\n" + RULE)
        print(f"✓ Employee ID {emp_id} updated successfully!")
        print(RULE)
        return True

    def view_all_employees(self, db):
        """Display all employees in database"""
        banner("ALL EMPLOYEES")
        try:
            employees = db.fetch_all_employees()
        except DatabaseError as e:
            print(f"✗ Error displaying employees: {e}")
            return []

        if not employees:
            print("\n✗ No employees found in database")
            print(RULE)
            return employees

        print("\n" + "ID".ljust(5) + "Name".ljust(20) + "Dept".ljust(15)
              + "Salary".ljust(12) + "Join Date".ljust(12) + "Email".ljust(25) + "Phone")
        print("-" * 120)
        for emp in employees:
            print(cell(emp.emp_id, 5)
                  + cell(emp.name, 20, cut=True)
                  + cell(emp.department, 15, cut=True)
                  + cell(format_salary(emp.salary, self.currency), 12)
                  + cell(format_date(emp.join_date), 12)
                  + cell(emp.email, 25, cut=True)
                  + (emp.phone or "N/A"))
        print("-" * 120)
        print(f"\n✓ Total Employees: {len(employees)}")
        print(RULE)
        return employees

    def search_employees(self, db):
        """Search by ID, partial name or partial department"""
        banner("SEARCH EMPLOYEE")
        print("1. Search by ID")
        print("2. Search by Name")
        print("3. Search by Department")
        print(RULE)

        choice = self.ask("Enter choice (1-3): ")
        try:
            if choice == "1":
                emp_id = self.ask_id("Enter Employee ID: ")
                if emp_id is None:
                    return []
                found = db.fetch_employee_by_id(emp_id)
                employees = [found] if found else []
            elif choice == "2":
                employees = db.fetch_employees_by_name(self.ask("Enter Name (partial match): "))
            elif choice == "3":
                employees = db.fetch_employees_by_department(self.ask("Enter Department: "))
            else:
                print("✗ Invalid choice")
                return []
        except DatabaseError as e:
            print(f"✗ Error searching employee: {e}")
            return []

        if not employees:
            print("\n✗ No matching employees found")
            print(RULE)
            return employees

        banner("SEARCH RESULTS")
        print("\n" + "ID".ljust(5) + "Name".ljust(20) + "Dept".ljust(15)
              + "Salary".ljust(12) + "Join Date")
        print("-" * 70)
        for emp in employees:
            print(cell(emp.emp_id, 5)
                  + cell(emp.name, 20, cut=True)
                  + cell(emp.department, 15, cut=True)
                  + cell(format_salary(emp.salary, self.currency), 12)
                  + format_date(emp.join_date))
        print("-" * 70)
        print(f"\n✓ Found {len(employees)} employee(s)")
        print(RULE)
        return employees

    def show_statistics(self, db):
        banner("DATABASE STATISTICS")
        try:
            total = db.count_employees()
            departments = db.department_stats()
            min_sal, max_sal, avg_sal = db.salary_stats()
        except DatabaseError as e:
            print(f"✗ Error fetching statistics: {e}")
            return

        print(f"\nTotal Employees: {total}")

        print("\nDepartment-wise Distribution:")
        print("-" * 60)
        print("Department".ljust(20) + "Count".ljust(10) + "Avg Salary")
        print("-" * 60)
        for department, count, avg_salary in departments:
            print((department or "Unassigned").ljust(20)
                  + str(count).ljust(10)
                  + format_salary(avg_salary, self.currency))

        print("\nSalary Statistics:")
        print("-" * 60)
        if min_sal is None:
            print("No salary data available")
        else:
            print(f"Minimum Salary: {format_salary(min_sal, self.currency)}")
            print(f"Maximum Salary: {format_salary(max_sal, self.currency)}")
            print(f"Average Salary: {format_salary(avg_sal, self.currency)}")
        print(RULE)
