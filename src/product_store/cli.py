"""Command line interface for running and inspecting the product store."""

import typer
from rich.console import Console
from rich.table import Table

from src.product_store.core.services import DbSessionService, ProductService, filter_products
from src.product_store.entities.product import SqlProductRepository
from src.product_store.runtime.context import get_config

console = Console()

app = typer.Typer(
    name="product-store",
    help="Product Store CLI - run the API and inspect the product catalog",
    no_args_is_help=True,
    rich_markup_mode="rich",
)


@app.command()
def serve(
    host: str | None = typer.Option(None, help="Bind address (defaults to config)"),
    port: int | None = typer.Option(None, help="Bind port (defaults to config)"),
    reload: bool = typer.Option(False, "--reload", help="Reload on code changes"),
) -> None:
    """Run the HTTP API under uvicorn."""
    import uvicorn

    config = get_config()
    bind_host = host or config.app.host
    bind_port = port or config.app.port
    console.print(
        f"[green]Starting product store on {bind_host}:{bind_port}[/green] "
        f"([cyan]{config.app.environment}[/cyan])"
    )
    uvicorn.run(
        "src.product_store.api.http.app:app",
        host=bind_host,
        port=bind_port,
        reload=reload,
        log_config=None,
    )


@app.command("init-db")
def init_db() -> None:
    """Create the database tables."""
    DbSessionService().create_all()
    console.print("[green]Database tables created[/green]")


@app.command("list")
def list_products(
    name: str | None = typer.Option(None, help="Exact product name"),
    category: str | None = typer.Option(None, help="Category name, any case"),
    available: bool | None = typer.Option(
        None, "--available/--unavailable", help="Filter by availability"
    ),
) -> None:
    """Print products, filtered the same way as GET /products."""
    database_service = DbSessionService()
    # A fresh database file has no tables until init-db or the API has run
    database_service.create_all()
    with database_service.session_scope() as session:
        service = ProductService(SqlProductRepository(session))
        products = filter_products(service, name, category, available)

    if not products:
        console.print("[yellow]No products found[/yellow]")
        return

    table = Table(title=f"Products ({len(products)})")
    table.add_column("ID", justify="right", style="cyan")
    table.add_column("Name")
    table.add_column("Category", style="magenta")
    table.add_column("Price", justify="right")
    table.add_column("Available")
    for product in products:
        table.add_row(
            str(product.id),
            product.name,
            product.category.value,
            f"{product.price:.2f}",
            "[green]yes[/green]" if product.available else "[red]no[/red]",
        )
    console.print(table)


def main() -> None:
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
