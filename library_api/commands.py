import click
from flask import Flask

from library_api.db_objects import ensure_db_objects
from library_api.errors import ApiError
from library_api.services.auth_service import AuthService


def register_commands(app: Flask):
    @app.cli.command("init-db")
    def init_db():
        """Create the users, book and issue tables if missing."""
        ensure_db_objects(app)
        click.echo("Tables ready.")

    @app.cli.command("create-user")
    @click.argument("username")
    @click.password_option()
    def create_user(username, password):
        """Create an admin user, e.g. the first one."""
        try:
            user = AuthService.create_user(username.strip(), password)
        except ApiError as e:
            raise click.ClickException(e.message)
        click.echo(f"Created user {user.username} ({user.user_id})")
