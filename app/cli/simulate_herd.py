# app/cli/simulate_herd.py
import click

from app.core.config import Settings
from app.services.setup import setup_inventory


@click.command()
@click.option('--products', 'product_count', type=click.IntRange(min=1), default=1000, show_default=True,
              help='Number of products to seed')
@click.option('--episodes', type=click.IntRange(min=1), default=5, show_default=True,
              help='Number of herd episodes to run')
@click.option('--seed', type=int, default=None, help='Random seed for a reproducible run')
def simulate_herd(product_count, episodes, seed):
    """Seed a local catalog and run thundering herd episodes against it"""
    inventory = setup_inventory(Settings(SEED_PRODUCT_COUNT=product_count, RANDOM_SEED=seed))

    for _ in range(episodes):
        event = inventory.simulator.simulate()
        click.echo(
            f"{event.id}: {event.vendor_count} vendors, {event.products_affected} products, "
            f"{event.conflicts_detected} conflicts, strategy={event.strategy.value}, {event.duration}ms"
        )

    stats = inventory.analytics.get_dashboard_stats()
    click.echo(
        f"Totals: {stats.total_conflicts} conflicts ({stats.resolved_conflicts} resolved), "
        f"{stats.low_stock_count} low stock, {stats.out_of_stock_count} out of stock"
    )


if __name__ == "__main__":
    simulate_herd()
