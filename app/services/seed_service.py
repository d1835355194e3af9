"""
Seed data for the in-memory catalog.

Generates a mock seller catalog (SKUs spread over the 15 categories, random
stock / velocity profiles, one of ten vendors each) and a daily sales series.
All randomness comes from the injected random.Random so a fixed seed gives a
reproducible catalog.
"""

import logging
import math
import random
import string
from datetime import timedelta
from typing import Dict, List, Optional

from app.core.enums import ProductCategory, FulfillmentType
from app.core.utils import round_half_up, utc_now
from app.models.product import Product
from app.schemas.product import SalesDataPoint
from app.services.status_service import derive_status

logger = logging.getLogger(__name__)

VENDORS = [
    "Shenzhen Electronics Co.", "Pacific Trade Group", "Alpine Supply Chain",
    "Eastern Distribution LLC", "WestCoast Imports", "GlobalSource Partners",
    "TechBridge Supply", "PrimePath Logistics", "OceanLink Trading", "SwiftFulfill Inc.",
]

ADJECTIVES = [
    "Premium", "Ultra", "Pro", "Essential", "Advanced", "Classic", "Elite",
    "Smart", "Eco", "Max", "Plus", "Deluxe", "Compact", "Heavy-Duty", "Wireless",
]

NOUNS_BY_CATEGORY: Dict[ProductCategory, List[str]] = {
    ProductCategory.ELECTRONICS: ["Bluetooth Speaker", "USB-C Hub", "Wireless Charger", "Power Bank", "Smart Watch", "Earbuds", "Webcam", "LED Strip"],
    ProductCategory.HOME_KITCHEN: ["Air Fryer", "Knife Set", "Blender", "Coffee Maker", "Cutting Board", "Spice Rack", "Dish Rack", "Pan Set"],
    ProductCategory.CLOTHING: ["T-Shirt", "Hoodie", "Jacket", "Jeans", "Sneakers", "Cap", "Socks Pack", "Belt"],
    ProductCategory.BOOKS: ["Cookbook", "Novel", "Textbook", "Journal", "Planner", "Guide", "Workbook", "Atlas"],
    ProductCategory.TOYS_GAMES: ["Board Game", "Puzzle Set", "Action Figure", "Building Blocks", "Card Game", "Drone", "RC Car", "Dollhouse"],
    ProductCategory.SPORTS_OUTDOORS: ["Yoga Mat", "Dumbbells", "Water Bottle", "Camping Tent", "Hiking Boots", "Resistance Bands", "Bike Light", "Jump Rope"],
    ProductCategory.BEAUTY: ["Face Cream", "Shampoo", "Sunscreen", "Lip Balm", "Hair Dryer", "Nail Kit", "Perfume", "Eye Cream"],
    ProductCategory.HEALTH_HOUSEHOLD: ["Vitamins", "First Aid Kit", "Thermometer", "Hand Sanitizer", "Air Purifier", "Humidifier", "Scale", "Pillow"],
    ProductCategory.AUTOMOTIVE: ["Dash Cam", "Car Charger", "Floor Mats", "Phone Mount", "LED Bulbs", "Tire Gauge", "Seat Cover", "Air Freshener"],
    ProductCategory.PET_SUPPLIES: ["Dog Bed", "Cat Toy", "Pet Carrier", "Food Bowl", "Leash", "Grooming Kit", "Treats", "Collar"],
    ProductCategory.OFFICE_PRODUCTS: ["Desk Organizer", "Stapler", "Notebooks", "Markers", "Label Maker", "Paper Shredder", "Desk Lamp", "Folder Set"],
    ProductCategory.TOOLS_HOME_IMPROVEMENT: ["Drill Set", "Screwdriver Kit", "Tape Measure", "Level", "Wrench Set", "Pliers", "Flashlight", "Toolbox"],
    ProductCategory.GROCERY: ["Olive Oil", "Protein Bars", "Tea Set", "Spice Mix", "Honey", "Granola", "Pasta", "Coffee Beans"],
    ProductCategory.BABY_PRODUCTS: ["Baby Monitor", "Diaper Bag", "Stroller", "High Chair", "Bottle Set", "Pacifier", "Car Seat", "Crib Sheet"],
    ProductCategory.GARDEN_OUTDOOR: ["Garden Hose", "Planter", "Solar Lights", "Bird Feeder", "Pruning Shears", "Compost Bin", "Trowel", "Watering Can"],
}

ASIN_CHARS = string.ascii_uppercase + string.digits


def generate_asin(rng: random.Random) -> str:
    return "B0" + "".join(rng.choice(ASIN_CHARS) for _ in range(8))


def generate_product(index: int, rng: random.Random) -> Product:
    """Build one seed product; version starts at 1 and status is derived, not drawn"""
    category = rng.choice(list(ProductCategory))
    title = f"{rng.choice(ADJECTIVES)} {rng.choice(NOUNS_BY_CATEGORY[category])}"
    price = round_half_up(rng.random() * 200 + 5, 2)
    cost = round_half_up(price * (0.3 + rng.random() * 0.4), 2)
    current_stock = rng.randrange(500)
    max_stock = rng.randrange(500) + 200
    reorder_point = math.floor(max_stock * 0.15)
    avg_daily_sales = round_half_up(rng.random() * 30 + 0.5, 1)
    last_7_day_sales = [math.floor(avg_daily_sales * (0.5 + rng.random())) for _ in range(7)]
    last_30_day_sales = math.floor(avg_daily_sales * 30 * (0.8 + rng.random() * 0.4))
    status, days_of_stock_left = derive_status(current_stock, reorder_point, max_stock, avg_daily_sales)

    return Product(
        id=f"prod_{index:06d}",
        asin=generate_asin(rng),
        sku=f"{category.sku_prefix}-{index:06d}",
        title=title,
        category=category,
        price=price,
        cost=cost,
        current_stock=current_stock,
        reorder_point=reorder_point,
        max_stock=max_stock,
        fulfillment=rng.choice(list(FulfillmentType)),
        avg_daily_sales=avg_daily_sales,
        last_7_day_sales=last_7_day_sales,
        last_30_day_sales=last_30_day_sales,
        status=status,
        days_of_stock_left=days_of_stock_left,
        vendor=rng.choice(VENDORS),
        last_updated=utc_now() - timedelta(days=rng.randrange(30)),
        version=1,
        rating=round_half_up(3 + rng.random() * 2, 1),
        review_count=rng.randrange(5000),
    )


def generate_products(count: int, rng: Optional[random.Random] = None) -> List[Product]:
    rng = rng or random.Random()
    products = [generate_product(i, rng) for i in range(count)]
    logger.info(f"Seeded {len(products)} products")
    return products


def generate_sales_data(days: int, rng: Optional[random.Random] = None) -> List[SalesDataPoint]:
    """Daily sales series, oldest first, ending today"""
    rng = rng or random.Random()
    today = utc_now()
    points = []
    for i in range(days - 1, -1, -1):
        base_sales = 150 + math.sin(i * 0.3) * 40
        sales = math.floor(base_sales + rng.random() * 60)
        avg_price = 25 + rng.random() * 15
        points.append(SalesDataPoint(
            date=(today - timedelta(days=i)).date().isoformat(),
            sales=sales,
            revenue=round_half_up(sales * avg_price, 2),
            orders=math.floor(sales * (0.6 + rng.random() * 0.3)),
        ))
    return points
