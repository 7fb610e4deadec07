"""Sample clients and sales for a fresh database."""
import logging
from datetime import date

from src.app.core.domain.models import Client, Sale
from src.app.infrastructure.client_repository import ClientRepository
from src.app.infrastructure.sale_repository import SaleRepository

logger = logging.getLogger(__name__)

SAMPLE_CLIENTS = [
    ("Ana Beatriz", "ana.b@example.com", "1992-05-01"),
    ("Carlos Eduardo", "cadu@example.com", "1987-08-15"),
    ("Maria Silva", "maria@example.com", "1990-12-25"),
    ("João Pedro", "joao@example.com", "1985-03-10"),
]

SAMPLE_SALES = [
    (150.00, date(2024, 1, 1)),
    (75.50, date(2024, 1, 15)),
    (200.00, date(2024, 2, 1)),
]


async def seed_sample_data(client_repository: ClientRepository, sale_repository: SaleRepository) -> int:
    """
    Insert the sample clients, each with the same three sales.

    Clients whose email already exists are skipped, so running this twice is harmless.

    Returns:
        Number of clients inserted
    """
    inserted = 0
    for name, email, birth_date in SAMPLE_CLIENTS:
        if await client_repository.get_by_email(email) is not None:
            logger.debug("Sample client %s already present", email)
            continue

        client = await client_repository.create(Client(name=name, email=email, birth_date=birth_date))

        for value, sale_date in SAMPLE_SALES:
            await sale_repository.create(Sale(client_id=client.id, value=value, sale_date=sale_date))
        inserted += 1

    logger.info("Seeded %d sample clients", inserted)
    return inserted
