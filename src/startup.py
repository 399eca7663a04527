from getpass import getpass

from database import Database, DatabaseError


class StartUp:
    """Collects the connection details and opens the session's database."""

    def __init__(self, settings, prompt=input, password_prompt=getpass):
        """Ask for host, database, user and password; blank answers take the defaults."""
        border = "=" * 60
        print(f"{border}\nDATABASE CONNECTION SETUP\n{border}")
        self.host = prompt(f"Enter host (default: {settings.host}): ").strip() or settings.host
        self.database = (
            prompt(f"Enter database name (default: {settings.database}): ").strip()
            or settings.database
        )
        self.user = prompt(f"Enter username (default: {settings.user}): ").strip() or settings.user
        self.password = password_prompt("Enter password: ")
        self.port = settings.port

    def connect(self):
        """Open the connection, or report why not and return None"""
        try:
            db = Database.connect_mysql(
                self.host, self.database, self.user, self.password, port=self.port
            )
        except DatabaseError as e:
            print(f"✗ Error connecting to MySQL: {e}")
            return None
        self.display_details(db)
        return db

    def display_details(self, db):
        border = "=" * 60
        print(f"{border}\n✓ Successfully connected to MySQL Server"
              f"\n✓ Connected to database: {db.name}\n{border}\n")
