#!/usr/bin/env python3
"""
Database management script for deployment.
Run this during the build/deployment pipeline to create tables and seed the
administrator account (ADMIN_USERNAME / ADMIN_PASSWORD / ADMIN_EMAIL).

Tables are created with db.create_all(), which only adds missing tables.
There are no migrations: changes to existing tables (new columns, dropped
constraints) have to be applied to the database by hand.
"""
import sys

from fencing.app import create_app
from fencing.exceptions import ValidationError
from fencing.models import Role, db


def deploy():
    """Run deployment tasks."""
    print("Creating database tables...")
    app = create_app()
    with app.app_context():
        db.create_all()
        print("✓ Database tables ready.")
        
        username = app.config['ADMIN_USERNAME']
        password = app.config['ADMIN_PASSWORD']
        if not password:
            print("ADMIN_PASSWORD not set, skipping administrator seed.")
            return
        
        if app.services.users.find_by_username(username):
            print(f"✓ Administrator '{username}' already exists.")
            return
        
        try:
            app.services.users.register_user(username, password, app.config['ADMIN_EMAIL'], role=Role.ADMIN)
            print(f"✓ Administrator '{username}' created.")
        except ValidationError as e:
            print(f"Error creating administrator: {e}")
            sys.exit(1)


if __name__ == '__main__':
    deploy()
