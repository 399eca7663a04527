import logging
import os
from contextlib import closing
import sqlite3
from datetime import date
from decimal import Decimal

import mysql.connector

from employee import COLUMNS, Employee

logger = logging.getLogger(__name__)

CREATE_EMPLOYEE_TABLE = {
    "mysql": """
        CREATE TABLE IF NOT EXISTS Employee (
            Emp_ID INT PRIMARY KEY AUTO_INCREMENT,
            Name VARCHAR(100) NOT NULL,
            Department VARCHAR(50),
            Salary DECIMAL(10, 2),
            Join_Date DATE,
            Email VARCHAR(100),
            Phone VARCHAR(15)
        )
    """,
    "sqlite": """
        CREATE TABLE IF NOT EXISTS Employee (
            Emp_ID INTEGER PRIMARY KEY AUTOINCREMENT,
            Name TEXT NOT NULL CHECK (Name <> ''),
            Department TEXT,
            Salary NUMERIC,
            Join_Date TEXT,
            Email TEXT,
            Phone TEXT
        )
    """,
}

SELECT_EMPLOYEE = f"SELECT {', '.join(COLUMNS)} FROM Employee"


class DatabaseError(Exception):
    """Any failure reported by the database driver."""


def _to_decimal(value):
    if value is None or isinstance(value, Decimal):
        return value
    return Decimal(str(value))


class Database:
    """Owns the single connection of a session and every statement sent on it.

    SQL is written with %s placeholders (mysql-connector style) and rewritten
    to ? when the connection is SQLite.
    """

    def __init__(self, conn, dialect="mysql", name=None):
        if dialect not in CREATE_EMPLOYEE_TABLE:
            raise ValueError(f"Unsupported dialect: {dialect}")
        self.conn = conn
        self.dialect = dialect
        self.name = name
        self.driver_error = sqlite3.Error if dialect == "sqlite" else mysql.connector.Error

    @classmethod
    def connect_mysql(cls, host, database, user, password, port=3306):
        try:
            conn = mysql.connector.connect(
                host=host,
                port=port,
                database=database,
                user=user,
                password=password,
            )
        except mysql.connector.Error as e:
            logger.debug("Connection to %s@%s/%s failed: %s", user, host, database, e)
            raise DatabaseError(str(e)) from e
        logger.info("Connected to %s@%s/%s", user, host, database)
        return cls(conn, "mysql", database)

    @classmethod
    def connect_sqlite(cls, db_file=":memory:"):
        path = db_file if db_file == ":memory:" else os.path.abspath(db_file)
        try:
            conn = sqlite3.connect(path)
        except sqlite3.Error as e:
            logger.debug("Connection to %s failed: %s", path, e)
            raise DatabaseError(str(e)) from e
        logger.info("Connected to %s", path)
        return cls(conn, "sqlite", path)

    # --- plumbing ---
    def _sql(self, query):
        if self.dialect == "sqlite":
            return query.replace("%s", "?")
        return query

    def _bind(self, params):
        if self.dialect != "sqlite":
            return tuple(params)
        bound = []
        for value in params:
            if isinstance(value, Decimal):
                value = str(value)
            elif isinstance(value, date):
                value = value.isoformat()
            bound.append(value)
        return tuple(bound)

    def _cursor(self):
        if self.dialect == "mysql":
            return self.conn.cursor(buffered=True)
        return self.conn.cursor()

    def execute_query(self, query, params=None):
        """Run one statement, commit, and return the cursor.

        The caller owns the cursor and closes it once read; run_query does
        that for statements whose result fits in one call.
        """
        sql = self._sql(query)
        cursor = None
        try:
            cursor = self._cursor()
            if params is not None:
                cursor.execute(sql, self._bind(params))
            else:
                cursor.execute(sql)
            self.conn.commit()
            return cursor
        except self.driver_error as e:
            if cursor is not None:
                cursor.close()
            logger.debug("Query error: %s\nSQL: %s\nParams: %s", e, sql, params)
            raise DatabaseError(str(e)) from e

    def run_query(self, query, params=None, read=None):
        """Execute, hand the cursor to read (if any), close it, return what read returned"""
        with closing(self.execute_query(query, params)) as cur:
            return read(cur) if read is not None else None

    def create_tables(self):
        self.run_query(CREATE_EMPLOYEE_TABLE[self.dialect])

    # --- insert ---
    def add_employee(self, employee):
        """Insert the record and return the ID the database assigned"""
        q = """
            INSERT INTO Employee (Name, Department, Salary, Join_Date, Email, Phone)
            VALUES (%s, %s, %s, %s, %s, %s)
        """
        employee.emp_id = self.run_query(q, employee.to_params(), lambda cur: cur.lastrowid)
        return employee.emp_id

    # --- read ---
    def _fetch_employees(self, query, params=None):
        rows = self.run_query(query, params, lambda cur: cur.fetchall())
        return [Employee.from_row(row) for row in rows]

    def fetch_all_employees(self):
        return self._fetch_employees(f"{SELECT_EMPLOYEE} ORDER BY Emp_ID")

    def fetch_employee_by_id(self, emp_id):
        row = self.run_query(
            f"{SELECT_EMPLOYEE} WHERE Emp_ID = %s", (emp_id,), lambda cur: cur.fetchone()
        )
        return Employee.from_row(row) if row else None

    def fetch_employees_by_name(self, term):
        return self._fetch_employees(
            f"{SELECT_EMPLOYEE} WHERE Name LIKE %s ORDER BY Emp_ID", (f"%{term}%",)
        )

    def fetch_employees_by_department(self, term):
        return self._fetch_employees(
            f"{SELECT_EMPLOYEE} WHERE Department LIKE %s ORDER BY Emp_ID", (f"%{term}%",)
        )

    # --- update ---
    def update_employee(self, employee):
        """Rewrite all editable columns of the row keyed by employee.emp_id"""
        q = """
            UPDATE Employee
            SET Name = %s, Department = %s, Salary = %s,
                Join_Date = %s, Email = %s, Phone = %s
            WHERE Emp_ID = %s
        """
        return self.run_query(
            q, employee.to_params() + (employee.emp_id,), lambda cur: cur.rowcount
        )

    # --- delete ---
    def delete_employee(self, emp_id):
        return self.run_query(
            "DELETE FROM Employee WHERE Emp_ID = %s", (emp_id,), lambda cur: cur.rowcount
        )

    # --- aggregates ---
    def count_employees(self):
        row = self.run_query("SELECT COUNT(*) FROM Employee", read=lambda cur: cur.fetchone())
        return int(row[0])

    def department_stats(self):
        """Return (department, count, average salary) ordered by count, largest first"""
        rows = self.run_query("""
            SELECT Department, COUNT(*) AS count, AVG(Salary) AS avg_salary
            FROM Employee
            GROUP BY Department
            ORDER BY count DESC, Department
        """, read=lambda cur: cur.fetchall())
        return [
            (department or None, int(count), _to_decimal(avg_salary))
            for department, count, avg_salary in rows
        ]

    def salary_stats(self):
        """Return (min, max, avg) salary; all None when no salary is stored"""
        row = self.run_query(
            "SELECT MIN(Salary), MAX(Salary), AVG(Salary) FROM Employee",
            read=lambda cur: cur.fetchone(),
        )
        return tuple(_to_decimal(value) for value in row)

    def close(self):
        try:
            self.conn.close()
        except self.driver_error as e:
            logger.warning("Error while closing connection: %s", e)
