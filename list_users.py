# list_users.py
from app import create_app
from models import User


def user_lines():
    return [f"{u.id} {u.email} {u.role}" for u in User.query.order_by(User.id).all()]


def main():
    app = create_app()
    with app.app_context():
        lines = user_lines()
    if not lines:
        print("No users found.")
    for line in lines:
        print(line)


if __name__ == "__main__":
    main()
