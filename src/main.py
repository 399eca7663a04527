import logging
import sys
from getpass import getpass

from config import ConfigError, load_settings
from database import DatabaseError
from managing_system import ManagingSystem, RULE
from startup import StartUp

logger = logging.getLogger(__name__)


def run_menu(system, db):
    """Serve menu choices until Exit; no operation failure ends the loop"""
    actions = {
        "1": system.add_employee,
        "2": system.delete_employee,
        "3": system.edit_employee,
        "4": system.view_all_employees,
        "5": system.search_employees,
        "6": system.show_statistics,
    }

    while True:
        try:
            system.display_menu()
            choice = system.ask("\nEnter your choice (1-7): ")
            if choice == "7":
                print("\n" + RULE)
                print("Thank you for using Employee Management System!")
                print(RULE)
                return
            action = actions.get(choice)
            if action is None:
                print("\n✗ Invalid choice! Please enter a number between 1-7")
                continue
            action(db)
        except (EOFError, KeyboardInterrupt):
            print()
            return
        except Exception as e:
            logger.debug("Operation failed", exc_info=True)
            print(f"\n✗ An error occurred: {e}")


def main(prompt=input, password_prompt=getpass):
    """Main application entry point; returns the process exit status"""
    try:
        settings = load_settings()
    except ConfigError as e:
        print(f"✗ Invalid configuration: {e}")
        return 1
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        startup = StartUp(settings, prompt=prompt, password_prompt=password_prompt)
    except (EOFError, KeyboardInterrupt):
        print("\n✗ Setup aborted. Exiting...")
        return 1

    db = startup.connect()
    if db is None:
        print("\n✗ Failed to connect to database. Exiting...")
        return 1

    try:
        db.create_tables()
        print("✓ Table 'Employee' is ready\n")
    except DatabaseError as e:
        print(f"✗ Error creating table: {e}")

    system = ManagingSystem(prompt=prompt, currency=settings.currency)
    try:
        run_menu(system, db)
    finally:
        db.close()
        print("\n" + RULE)
        print("✓ MySQL connection closed")
        print(RULE)
    return 0


# Ensure main() only runs if this script is executed directly
if __name__ == "__main__":
    sys.exit(main())
