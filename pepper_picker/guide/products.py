from __future__ import annotations

from dataclasses import dataclass

from .models import PriceTier, ProductRecommendation


class UnknownProductError(KeyError):
    """Raised when a stage asks for a product id missing from the catalog."""


@dataclass(frozen=True)
class _Product:
    category: str
    name: str
    price_range: str | None = None
    price_tier: PriceTier | None = None
    affiliate_url: str | None = None


PRODUCT_CATALOG: dict[str, _Product] = {
    # seed starting
    "seed_starting_tray": _Product("seed-starting", "72-Cell Seed Starting Tray with Humidity Dome", "$15-25", "low"),
    "seed_starting_mix": _Product("seed-starting", "Organic Seed Starting Mix", "$10-15", "low"),
    "heat_mat": _Product("seed-starting", "Seedling Heat Mat with Thermostat", "$25-40", "mid"),
    "grow_light": _Product("lighting", "LED Seedling Grow Light Strip", "$30-50", "mid"),
    "grow_light_premium": _Product("lighting", "Full-Spectrum LED Grow Light Panel", "$120-250", "high"),
    # containers and soil
    "container_5gal": _Product("containers", "5 Gallon Fabric Grow Bags (5-pack)", "$15-25", "low"),
    "self_watering_pot": _Product("containers", "Self-Watering Planter", "$30-60", "mid"),
    "potting_mix": _Product("soil", "Premium Potting Mix", "$15-25", "low"),
    "raised_bed_kit": _Product("beds", "Galvanized Raised Garden Bed Kit", "$60-150", "high"),
    "garden_soil": _Product("soil", "Raised Bed Garden Soil", "$15-30", "low"),
    "soil_test_kit": _Product("soil", "Soil pH and Nutrient Test Kit", "$15-30", "low"),
    "greenhouse_kit": _Product("protection", "Walk-In Greenhouse Kit", "$150-400", "high"),
    "mulch": _Product("soil", "Organic Straw Mulch", "$10-20", "low"),
    # transplanting
    "garden_gloves": _Product("tools", "Nitrile-Coated Garden Gloves", "$10-15", "low"),
    "transplant_fertilizer": _Product("feeding", "Starter Transplant Fertilizer", "$10-20", "low"),
    "row_covers": _Product("protection", "Floating Row Cover Fabric", "$15-30", "low"),
    # support
    "plant_stakes": _Product("support", "Bamboo Plant Stakes (4 ft, 25-pack)", "$15-25", "low"),
    "pruning_shears": _Product("tools", "Bypass Pruning Shears", "$15-35", "mid"),
    "garden_twine": _Product("support", "Soft Jute Garden Twine", "$5-10", "low"),
    # feeding and watering
    "pepper_fertilizer": _Product("feeding", "Organic Tomato and Pepper Fertilizer", "$15-25", "low"),
    "drip_irrigation_kit": _Product("watering", "Garden Drip Irrigation Kit", "$40-80", "mid"),
    "soaker_hose": _Product("watering", "Soaker Hose (50 ft)", "$20-35", "low"),
    "calcium_supplement": _Product("feeding", "Calcium Foliar Spray", "$10-20", "low"),
    # pests
    "neem_oil": _Product("pest-control", "Cold-Pressed Neem Oil Spray", "$10-20", "low"),
    "insecticidal_soap": _Product("pest-control", "Insecticidal Soap Concentrate", "$10-15", "low"),
    # harvest
    "harvest_basket": _Product("harvest", "Wooden Harvest Basket", "$20-40", "mid"),
    "dehydrator": _Product("preserving", "Food Dehydrator with Adjustable Thermostat", "$60-150", "high"),
    "compost_bin": _Product("soil", "Dual-Chamber Tumbling Compost Bin", "$80-150", "high"),
}


def get_product(category_id: str, reason: str) -> ProductRecommendation:
    """Look up a static product and attach the stage-specific rationale."""
    try:
        product = PRODUCT_CATALOG[category_id]
    except KeyError:
        raise UnknownProductError(category_id) from None
    return ProductRecommendation(
        id=category_id,
        category=product.category,
        name=product.name,
        reason=reason,
        price_range=product.price_range,
        price_tier=product.price_tier,
        affiliate_url=product.affiliate_url,
    )
