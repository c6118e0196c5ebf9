"""
Seed the catalog.

Creates the schema and inserts the demo categories and products.
Categories are skipped when their ID exists, products when their name exists.

Usage:
    python -m scripts.seed_catalog
"""
import asyncio
from decimal import Decimal

from dotenv import load_dotenv
from sqlalchemy import select

from core.data.models import CategoryModel, ProductModel
from core.infrastructure.database.pool import ConnectionPool
from core.infrastructure.logging import get_logger
from core.settings.sections.database import DatabaseSettings


logger = get_logger(__name__)


CATEGORIES = [
    (1, "거실가구"),
    (2, "침실가구"),
    (3, "주방가구"),
]

PRODUCTS = [
    {
        "category_id": 1,
        "name": "STRANDMON 스트란드몬",
        "price": Decimal("249000"),
        "stock": 10,
        "description": "편안한 윙체어, 노르드발라 다크그레이",
        "image_url": "https://www.ikea.com/kr/ko/images/products/strandmon-wing-chair-nordvalla-dark-grey__0325432_pe517964_s5.jpg",
    },
    {
        "category_id": 1,
        "name": "LACK 라크",
        "price": Decimal("15000"),
        "stock": 50,
        "description": "보조테이블, 화이트, 55x55 cm",
        "image_url": "https://www.ikea.com/kr/ko/images/products/lack-side-table-white__0088019_pe219430_s5.jpg",
    },
    {
        "category_id": 2,
        "name": "MALM 말",
        "price": Decimal("199000"),
        "stock": 20,
        "description": "높은침대프레임+수납상자2, 화이트/뤼뢰",
        "image_url": "https://www.ikea.com/kr/ko/images/products/malm-high-bed-frame-2-storage-boxes-white-luroey__0638608_pe699032_s5.jpg",
    },
    {
        "category_id": 3,
        "name": "RASKOG 로스코그",
        "price": Decimal("39900"),
        "stock": 100,
        "description": "카트, 화이트, 35x45x78 cm",
        "image_url": "https://www.ikea.com/kr/ko/images/products/raskog-trolley-white__0102602_pe294698_s5.jpg",
    },
]


async def seed(pool: ConnectionPool) -> int:
    """Insert missing categories and products; returns the number of new products."""
    await pool.create_schema()

    added = 0
    async with pool.acquire() as session:
        for category_id, name in CATEGORIES:
            if await session.get(CategoryModel, category_id) is None:
                session.add(CategoryModel(category_id=category_id, name=name))
        await session.flush()
        logger.info("✅ Categories ready")

        for product in PRODUCTS:
            result = await session.execute(
                select(ProductModel.product_id).where(ProductModel.name == product["name"])
            )
            if result.scalar_one_or_none() is None:
                session.add(ProductModel(**product))
                added += 1

        await session.commit()

    logger.info(f"✅ Seeded {added} product(s)")
    return added


async def main():
    load_dotenv()
    pool = ConnectionPool(DatabaseSettings())
    try:
        await seed(pool)
    except Exception as e:
        logger.error(f"❌ Seeding failed: {e}", exc_info=True)
        raise
    finally:
        await pool.dispose()


if __name__ == "__main__":
    asyncio.run(main())
