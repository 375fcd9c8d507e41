"""Row generator for the products table."""

import math
import random
from collections.abc import Iterator
from datetime import datetime

from catalog_demo.entities.core._base import utc_now
from catalog_demo.entities.service.product import Product, StockStatus

PRODUCT_NAMES = [
    "Wireless Headphones", "Smart Watch", "Laptop Stand", "Mechanical Keyboard", "USB-C Hub",
    "Wireless Mouse", "4K Monitor", "Webcam HD", "Gaming Chair", "Standing Desk",
    "Bluetooth Speaker", "Tablet Pro", "Phone Case", "Screen Protector", "Charging Cable",
    "Wireless Charger", "External SSD", "RAM Module", "Graphics Card", "CPU Cooler",
    "Motherboard", "Power Supply", "PC Case", "LED Strip", "Cable Management",
    "Desk Mat", "Wrist Rest", "Monitor Arm", "Laptop Bag", "Backpack",
    "Microphone", "Audio Interface", "Studio Monitors", "MIDI Keyboard", "Guitar Cable",
    "Drumsticks", "Music Stand", "Headphone Amp", "Pop Filter", "Boom Arm",
    "Drawing Tablet", "Stylus Pen", "Art Prints", "Canvas Boards", "Paint Brushes",
    "Acrylic Paint", "Watercolor Set", "Sketchbook", "Easel", "Portfolio Case",
]

CATEGORIES = [
    "Audio", "Wearables", "Accessories", "Peripherals", "Displays",
    "Furniture", "Storage", "Components", "Music", "Art",
]

_STATUSES = (StockStatus.IN_STOCK, StockStatus.LOW_STOCK, StockStatus.OUT_OF_STOCK)


def status_for(index: int) -> StockStatus:
    """Every third row is out of stock, then every fifth is low stock."""
    if index % 3 == 0:
        return _STATUSES[2]
    if index % 5 == 0:
        return _STATUSES[1]
    return _STATUSES[0]


def quantity_for(status: StockStatus, rng: random.Random) -> int:
    if status is StockStatus.OUT_OF_STOCK:
        return 0
    if status is StockStatus.LOW_STOCK:
        return rng.randrange(10)
    return rng.randrange(150)


def name_for(index: int) -> str:
    """Cycle the base names; later cycles get a `` v<k>`` suffix."""
    base = PRODUCT_NAMES[(index - 1) % len(PRODUCT_NAMES)]
    if index // len(PRODUCT_NAMES) > 0:
        return f"{base} v{math.ceil(index / len(PRODUCT_NAMES))}"
    return base


def generate_product(index: int, checked: datetime, rng: random.Random) -> Product:
    status = status_for(index)
    return Product(
        name=name_for(index),
        category=CATEGORIES[(index - 1) % len(CATEGORIES)],
        price=round(rng.random() * 900 + 50, 2),
        status=status,
        quantity=quantity_for(status, rng),
        last_checked=checked,
    )


def generate_products(
    count: int,
    batch_size: int = 5000,
    seed: int | None = None,
    checked: datetime | None = None,
) -> Iterator[list[Product]]:
    """Yield batches of generated products numbered 1..count.

    Every row of a run shares one ``last_checked`` timestamp.
    """
    if batch_size < 1:
        raise ValueError("batch_size must be positive")

    rng = random.Random(seed)
    checked = checked or utc_now()

    batch: list[Product] = []
    for index in range(1, count + 1):
        batch.append(generate_product(index, checked, rng))
        if len(batch) >= batch_size:
            yield batch
            batch = []
    if batch:
        yield batch
