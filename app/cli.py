import click

from app.extensions import db
from app.services.errors import InvalidParameters
from app.services.ledger import advance_block_height, init_chain_state
from app.services.security import generate_principal_token


def register_commands(app):
    @app.cli.command("init-ledger")
    def init_ledger():
        """Create tables and the chain state row."""
        db.create_all()
        state = init_chain_state()
        click.echo(f"Ledger ready at block {state.block_height}.")

    @app.cli.command("issue-token")
    @click.argument("principal")
    def issue_token(principal):
        """Print a bearer token for PRINCIPAL."""
        click.echo(generate_principal_token(principal))

    @app.cli.command("advance-block")
    @click.argument("height", type=int)
    def advance_block(height):
        try:
            block_height = advance_block_height(height)
        except InvalidParameters as exc:
            raise click.ClickException(exc.message) from exc
        click.echo(f"Chain at block {block_height}.")
