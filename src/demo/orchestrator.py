"""Cosmos DB getting-started walkthrough over family documents.

Each step takes the ``DemoContext`` built by the previous steps and awaits
its remote calls one at a time. The client itself is owned by the caller,
which is responsible for closing it.
"""

from dataclasses import dataclass, field
from typing import List, Optional

from azure.cosmos.aio import CosmosClient, DatabaseProxy

from config import Settings
from demo.console import print_family, print_line, print_step
from demo.sample_data import sample_families
from family_store.exceptions import FamilyServiceError
from family_store.family_repository import LAST_NAME_QUERY, FamilyRepository
from family_store.models import Family, ReadStatus
from family_store.provisioning import delete_database, ensure_container, ensure_database
from utils.logging import logger

QUERY_LAST_NAME = "Smith"
REPLACE_FAMILY_ID = "Wakefield.7"
REPLACE_PARTITION_KEY = "Wakefield"
DELETE_FAMILY_ID = "Wakefield.7"
DELETE_PARTITION_KEY = "Wakefield"


@dataclass
class DemoReport:
    """What a demo run did, step by step."""

    database_id: Optional[str] = None
    container_id: Optional[str] = None
    created_ids: List[str] = field(default_factory=list)
    existing_ids: List[str] = field(default_factory=list)
    query_results: List[Family] = field(default_factory=list)
    replaced_family: Optional[Family] = None
    deleted_id: Optional[str] = None
    database_deleted: bool = False
    request_charge: float = 0.0


@dataclass
class DemoContext:
    """State owned by one demo run and threaded through every step."""

    client: CosmosClient
    settings: Settings
    database: Optional[DatabaseProxy] = None
    families: Optional[FamilyRepository] = None
    report: DemoReport = field(default_factory=DemoReport)

    def require_database(self) -> DatabaseProxy:
        if self.database is None:
            raise RuntimeError("Database has not been created yet")
        return self.database

    def require_families(self) -> FamilyRepository:
        if self.families is None:
            raise RuntimeError("Container has not been created yet")
        return self.families


async def create_database(ctx: DemoContext) -> None:
    """Create the demo database unless it exists."""
    print_step("Create database")
    ctx.database = await ensure_database(ctx.client, ctx.settings.database_id, ctx.settings.offer_throughput)
    ctx.report.database_id = ctx.database.id
    print_line(f"CosmosDB Database Created :{ctx.database.id}")


async def create_container(ctx: DemoContext) -> None:
    """Create the family container, partitioned on the last name."""
    print_step("Create container")
    container = await ensure_container(
        ctx.require_database(),
        ctx.settings.container_id,
        ctx.settings.partition_key_path,
        ctx.settings.offer_throughput,
    )
    ctx.families = FamilyRepository(container)
    ctx.report.container_id = container.id
    print_line(f"Created Container: {container.id}")


async def add_items_to_container(ctx: DemoContext) -> None:
    """Add each sample family unless a point read finds it already stored."""
    print_step("Add items")
    families = ctx.require_families()

    for family in sample_families():
        result = await families.ensure_family(family)
        ctx.report.request_charge += result.request_charge

        if result.created:
            ctx.report.created_ids.append(result.family.id)
            print_line(f"Created item in database with id: {result.family.id} Operation consumed {result.request_charge} RUs.")
        else:
            ctx.report.existing_ids.append(result.family.id)
            print_line(f"Item in database with id: {result.family.id} already exists")


async def query_items(ctx: DemoContext) -> List[Family]:
    """Query the families sharing a last name, draining every result page."""
    print_step("Query items")
    families = ctx.require_families()

    print_line(f"Running query: {LAST_NAME_QUERY} (@last_name = '{QUERY_LAST_NAME}')")
    results = []
    async for family in families.iter_families(
        LAST_NAME_QUERY,
        parameters=[{"name": "@last_name", "value": QUERY_LAST_NAME}],
    ):
        results.append(family)
        print_family(family, f"Read {family.id}")

    ctx.report.query_results = results
    return results


async def replace_family_item(ctx: DemoContext) -> Family:
    """Register the Wakefield family and move its first child up to grade 6."""
    print_step("Replace item")
    families = ctx.require_families()

    result = await families.read_family(REPLACE_FAMILY_ID, REPLACE_PARTITION_KEY)
    if result.status != ReadStatus.FOUND:
        raise FamilyServiceError(f"Cannot replace family {REPLACE_FAMILY_ID}: {result.detail}", status_code=result.status_code)

    family = result.family
    family.is_registered = True
    family.children[0].grade = 6

    response = await families.replace_family(family)
    ctx.report.request_charge += result.request_charge + response.request_charge
    ctx.report.replaced_family = response.family

    print_line(f"Updated Family [{family.last_name},{family.id}].")
    print_family(response.family, "Body is now")
    return response.family


async def delete_family_item(ctx: DemoContext) -> None:
    """Delete the Wakefield family."""
    print_step("Delete item")
    families = ctx.require_families()

    ctx.report.request_charge += await families.delete_family(DELETE_FAMILY_ID, DELETE_PARTITION_KEY)
    ctx.report.deleted_id = DELETE_FAMILY_ID
    print_line(f"Deleted Family [{DELETE_PARTITION_KEY},{DELETE_FAMILY_ID}]")


async def delete_database_and_cleanup(ctx: DemoContext) -> None:
    """Delete the database along with its container and documents."""
    print_step("Delete database")
    database_id = ctx.require_database().id

    await delete_database(ctx.client, database_id)
    ctx.database = None
    ctx.families = None
    ctx.report.database_deleted = True
    print_line(f"Deleted Database: {database_id}")


async def run_demo(client: CosmosClient, settings: Settings) -> DemoReport:
    """Run every step in order; the first failure aborts the remaining ones."""
    ctx = DemoContext(client=client, settings=settings)

    await create_database(ctx)
    await create_container(ctx)
    await add_items_to_container(ctx)
    await query_items(ctx)
    await replace_family_item(ctx)
    await delete_family_item(ctx)
    await delete_database_and_cleanup(ctx)

    logger.info(f"Demo finished, {ctx.report.request_charge} RUs consumed")
    return ctx.report
