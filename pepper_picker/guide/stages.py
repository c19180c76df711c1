"""
Stage builders for the growing guide.

Each builder is a pure function ``Item -> Stage``. It derives the variety's
traits once, then selects paragraphs, tips and products from them. Builders
read nothing but the item and the static product catalog, and never look at
another stage's output.
"""
from __future__ import annotations

from ..catalog.models import Item
from .models import GuideTip, ProductRecommendation, Stage
from .products import get_product
from .traits import VarietyTraits


def _generic(text: str) -> GuideTip:
    return GuideTip(text=text, is_variety_specific=False)


def _specific(text: str) -> GuideTip:
    return GuideTip(text=text, is_variety_specific=True)


def _stage(
    stage_id: str,
    number: int,
    title: str,
    subtitle: str,
    paragraphs: list[str],
    tips: list[GuideTip],
    products: list[ProductRecommendation],
) -> Stage:
    return Stage(
        id=stage_id,
        stage_number=number,
        title=title,
        subtitle=subtitle,
        paragraphs=tuple(paragraphs),
        tips=tuple(tips),
        products=tuple(products),
    )


def seed_starting(item: Item) -> Stage:
    t = VarietyTraits.from_item(item)
    paragraphs = [
        f"Peppers need a long, warm start indoors. Plan to start {t.name} seeds {t.weeks_indoor} weeks "
        "before your last expected frost date. In most climates that means sowing between late January "
        "and mid-March depending on your region.",
        "Sow seeds 1/4 inch (6 mm) deep in a quality seed starting mix. Peppers demand warm soil to "
        "germinate, ideally 80-85°F (27-29°C), so a seedling heat mat is essential rather than optional. "
        "At those temperatures expect germination in 7-14 days.",
    ]
    if t.is_superhot:
        paragraphs.append(
            f"Superhot varieties like {t.name} are notoriously slow germinators. Nothing may happen for "
            "2-4 weeks, and some seeds take up to 6 weeks to sprout. Keep the heat mat running and the "
            "soil evenly moist. Patience is key with these varieties."
        )
    paragraphs.append(
        "Once seedlings emerge they need 14-16 hours of strong light per day. A sunny window rarely "
        "provides enough and seedlings turn tall and leggy. A grow light 2-4 inches above the "
        "seedlings produces stockier transplants that perform much better in the garden."
    )

    tips = [
        _generic("Plant seeds 1/4 inch deep in moist seed-starting mix."),
        _generic("Use a heat mat: peppers need 80-85°F soil for germination."),
        _generic("Provide 14-16 hours of light per day once seedlings emerge."),
    ]
    if t.is_beginner:
        tips.append(_specific(f"{t.name} is beginner-friendly and germinates more reliably than many peppers."))
    if t.is_superhot:
        tips.append(_specific(f"{t.name} can take 2-6 weeks to germinate, which is normal for superhots."))
    if t.needs_early_start:
        tips.append(_specific(f"Start early: {t.name} needs {t.maturity_range} days to mature."))

    products = [
        get_product("seed_starting_tray", f"Start {t.name} seeds in individual cells for easy transplanting."),
        get_product("seed_starting_mix", "Lightweight, sterile mix designed for seed germination."),
        get_product("heat_mat", "Essential for peppers: holds the 80-85°F soil temperature they need."),
        get_product("grow_light", "Stronger seedlings and less legginess than windowsill growing."),
    ]
    if t.is_indoor_suitable or t.is_superhot:
        products.append(
            get_product(
                "grow_light_premium",
                "Upgrade to a full-size panel for growing peppers indoors or starting many varieties at once.",
            )
        )

    return _stage(
        "seed-starting", 1, "Seed Starting",
        f"Start indoors {t.weeks_indoor} weeks before last frost",
        paragraphs, tips, products,
    )


def growing_environment(item: Item) -> Stage:
    t = VarietyTraits.from_item(item)
    paragraphs: list[str] = []
    if t.is_container_friendly:
        paragraphs += [
            f"{t.name} is well-suited for container growing. Use a container of at least {t.container_size}; "
            "smaller pots dry out quickly and restrict root growth, which directly reduces your harvest. "
            "Fabric grow bags work well because they air-prune the roots.",
            "Fill the container with a high-quality potting mix, not garden soil, which compacts and drains "
            "poorly in pots. Self-watering containers suit peppers well since they like consistently moist "
            "but never waterlogged soil.",
            "Place the container where it gets at least 6-8 hours of direct sun daily. Peppers love sun and "
            "heat, so the warmest, sunniest spot you have is the best one. Containers can follow the sun or "
            "come indoors if frost threatens.",
        ]
    else:
        paragraphs += [
            f"{t.name} does best in the ground or in raised beds where its roots can spread freely. Plan for "
            f"{t.spacing} between plants to allow good air circulation, which helps prevent fungal disease.",
            "Work 2-3 inches of compost into the soil before planting. Peppers thrive in well-draining soil "
            "with a pH between 6.0 and 6.8. If you are unsure about your soil, a simple test kit can save a lot "
            "of trouble because peppers are sensitive to nutrient imbalances.",
            "Choose a spot with at least 6-8 hours of direct sun and good air drainage, away from low-lying "
            "areas where cold air settles. Raised beds warm up faster in spring and give peppers the heat "
            "they crave.",
        ]
    if t.wants_greenhouse:
        paragraphs.append(
            f"{t.name} benefits significantly from greenhouse or protected growing. A greenhouse extends the "
            "season, holds higher temperatures and shelters plants from wind and heavy rain. Even a simple "
            "walk-in greenhouse or cold frame makes a big difference in cooler climates."
        )
    if t.is_indoor_suitable:
        paragraphs.append(
            f"{t.name} can also be grown indoors year-round with adequate lighting. Indoor plants need a strong "
            "full-spectrum grow light for at least 14 hours a day and good air circulation. Many growers keep "
            "indoor plants producing through winter."
        )

    tips = [_generic("Peppers need at least 6-8 hours of direct sunlight daily.")]
    if t.is_container_friendly:
        tips += [
            _specific(f"{t.name} needs at least a {t.container_size} container."),
            _generic("Use potting mix, not garden soil, in containers."),
        ]
    else:
        tips += [
            _generic("Amend soil with compost before planting for best results."),
            _specific(f"Space {t.name} plants {t.spacing} apart."),
        ]
    if t.is_heat_hardy:
        tips.append(_specific(f"{t.name} handles extreme heat well, so give it your hottest, sunniest spot."))

    if t.is_container_friendly:
        products = [
            get_product("container_5gal", f"{t.name}'s size is well-suited for container growing."),
            get_product(
                "self_watering_pot",
                f"Self-watering planters keep {t.name} consistently moist and cut down on watering chores.",
            ),
            get_product("potting_mix", "High-quality potting mix with good drainage for containers."),
        ]
    else:
        products = [
            get_product("raised_bed_kit", f"Give {t.name}'s roots room to spread in a deep raised bed."),
            get_product("garden_soil", "Rich soil mix for raised beds and garden planting."),
            get_product("soil_test_kit", "Test pH and nutrients before planting; peppers want pH 6.0-6.8."),
        ]
    if t.wants_greenhouse:
        products.append(
            get_product("greenhouse_kit", f"Extend {t.name}'s season and keep the warm temperatures it craves.")
        )
    if t.is_indoor_suitable and not t.wants_greenhouse:
        products.append(
            get_product("grow_light_premium", f"Grow {t.name} indoors year-round with a full-spectrum light panel.")
        )
    products.append(get_product("mulch", "2-3 inches of mulch retains moisture and keeps roots warm."))

    if t.is_container_friendly:
        subtitle = f"Container growing in {t.container_size}+ pots"
    elif t.wants_greenhouse:
        subtitle = "Greenhouse or raised bed growing"
    else:
        subtitle = "Raised beds or in-ground planting"

    return _stage("growing-environment", 2, "Growing Environment", subtitle, paragraphs, tips, products)


def transplanting(item: Item) -> Stage:
    t = VarietyTraits.from_item(item)
    paragraphs = [
        f"Transplant {t.name} outdoors after all danger of frost has passed and nights stay above 55°F (13°C). "
        "Peppers are more cold-sensitive than tomatoes: cold soil and cool nights stall growth and can "
        "permanently stunt plants. In most regions that is 2-4 weeks after the last frost date.",
        "Harden off seedlings over 7-10 days before planting out. Start with 1-2 hours in a sheltered, shady "
        "spot, then gradually increase sun exposure and time outdoors. This prevents transplant shock, "
        "which can set peppers back by weeks.",
    ]
    if t.wants_hot_climate:
        paragraphs.append(
            f"{t.name} is adapted to hot climates and wants soil of at least 65°F (18°C), ideally 70°F or more. "
            "Black plastic mulch or landscape fabric can pre-warm the bed. A week spent waiting for warm soil "
            "pays off in faster growth."
        )
    paragraphs.append(
        "Do not bury pepper stems deep the way you would tomatoes. Plant at the depth they grew in their pots, "
        "firm the soil gently around the root ball and water deeply. A handful of compost or transplant "
        "fertilizer in the planting hole gives roots a boost."
    )

    tips = [
        _generic("Harden off seedlings for 7-10 days before transplanting."),
        _generic("Wait until nights are consistently above 55°F; peppers hate cold."),
        _generic("Plant at the same depth as the pot. Do not bury stems like tomatoes."),
        _specific(f"Space {t.name} plants {t.spacing} apart."),
    ]
    if t.is_cold_sensitive:
        tips.append(_specific(f"{t.name} has very low cold tolerance; protect it from anything below 50°F."))
    if t.is_cold_hardy:
        tips.append(_specific(f"{t.name} tolerates cooler conditions better than most peppers."))

    products = [
        get_product("garden_gloves", "Protect your hands while transplanting."),
        get_product("transplant_fertilizer", "High-phosphorus fertilizer encourages strong root establishment."),
    ]
    if t.needs_cold_protection:
        products.append(
            get_product(
                "row_covers",
                f"Keep {t.name} protected during cool nights in the first weeks after transplanting.",
            )
        )

    return _stage(
        "transplanting", 3, "Transplanting",
        "Harden off, plant at soil level, and protect from cold",
        paragraphs, tips, products,
    )


def support_training(item: Item) -> Stage:
    t = VarietyTraits.from_item(item)
    if t.is_tall:
        paragraphs = [
            f"{t.name} has a tall growth habit, reaching {t.height_cm} cm ({t.height_in} inches). As fruit "
            "develops, heavy branches bend and can snap without support. Install stakes at transplanting "
            "time, not after the plant is loaded with peppers.",
            "Use 3-4 foot bamboo stakes or tomato cages. Tie the main stem loosely to the stake with soft ties "
            "as the plant grows, focusing on the branching points where heavy fruit clusters develop.",
        ]
        subtitle = "Tall plants need staking at transplanting time"
    elif t.is_compact:
        paragraphs = [
            f"{t.name} has a compact growth habit ({t.height_cm} cm), so heavy staking is rarely necessary. "
            "Even compact plants can get top-heavy when loaded with fruit, and a single short stake or small "
            "cage keeps them from tipping.",
        ]
        subtitle = "Compact plants need minimal support"
    else:
        paragraphs = [
            f"{t.name} grows in a bushy habit, reaching {t.height_cm} cm ({t.height_in} inches). Bushy peppers "
            "mostly support themselves but benefit from light staking once fruit weighs the branches down. "
            "A ring of twine around the plant, tied to a central stake, keeps everything upright.",
        ]
        subtitle = "Bushy plants benefit from light staking"

    paragraphs.append(
        "Pinch off the first few flower buds that appear before transplanting or in the two weeks after. "
        "This redirects energy into roots and branching, which means more fruit later. Once the plant is "
        "established and growing vigorously, let it flower and fruit freely."
    )
    if t.is_heavy_yielder:
        paragraphs.append(
            f"{t.name} is a heavy producer. The weight of a full crop can bend or break unsupported branches, "
            "so proactive staking and tying pays off when every branch is loaded."
        )

    tips = [_generic("Pinch early flower buds to encourage stronger plants and higher yields.")]
    if t.is_tall:
        tips += [
            _specific(f"{t.name}'s tall habit needs 3-4 ft stakes set at transplanting time."),
            _generic("Tie stems loosely; tight ties cut into growing stems."),
        ]
    elif t.is_compact:
        tips.append(_specific(f"{t.name}'s compact size rarely needs more than a short stake."))
    else:
        tips.append(_generic("Use soft ties or twine loops to support laden branches."))

    if t.is_tall:
        products = [
            get_product("plant_stakes", f"Support {t.name}'s tall growth with sturdy bamboo stakes."),
            get_product("pruning_shears", "Clean cuts when removing suckers or damaged branches."),
            get_product("garden_twine", "Tie branches gently to stakes as the plant grows."),
        ]
    else:
        products = [
            get_product("garden_twine", "Loop around bushy plants to keep branches upright under fruit weight."),
        ]

    return _stage("support-training", 4, "Support & Training", subtitle, paragraphs, tips, products)


def feeding_care(item: Item) -> Stage:
    t = VarietyTraits.from_item(item)
    paragraphs = [
        "Peppers are moderate feeders that respond well to balanced nutrition. Use a transplant fertilizer at "
        "planting, then switch to a formula higher in phosphorus and potassium, such as 5-10-10, once "
        f"{t.name} begins flowering. Too much nitrogen during fruiting grows leaves instead of peppers.",
        "Water deeply and consistently, about 1-2 inches per week. Water at the base in the morning rather "
        "than overhead to keep foliage dry. Drought followed by heavy watering causes blossom drop and can "
        "lead to blossom end rot, especially on larger fruit.",
    ]
    if t.is_thick_walled:
        paragraphs.append(
            f"Thick-walled varieties like {t.name} are especially prone to blossom end rot when watering is "
            "uneven. It shows as a dark, sunken patch on the bottom of the fruit. Keep moisture even and "
            "consider a calcium foliar spray during peak fruiting if symptoms appear."
        )
    if t.is_superhot:
        paragraphs.append(
            f"Superhot peppers like {t.name} have a long season and benefit from feeding every 2-3 weeks "
            "through summer. They also produce more capsaicin under mild stress, so some growers water "
            "slightly less once fruit is setting to boost heat."
        )
    if t.is_container_friendly:
        paragraphs.append(
            "Container-grown peppers need more frequent feeding because nutrients wash out with each watering. "
            "Feed every 1-2 weeks with a diluted liquid fertilizer, or add a slow-release granular at planting. "
            "Water containers until water drains from the bottom."
        )

    tips = [
        _generic("Water 1-2 inches per week at the base, not overhead."),
        _generic("Switch to low-nitrogen, high-potassium fertilizer once flowering begins."),
        _generic("Mulch 2-3 inches deep to retain moisture and keep roots warm."),
    ]
    if t.is_heat_hardy:
        tips.append(_specific(f"{t.name} handles heat well but still needs steady watering during heat waves."))
    if t.is_thick_walled:
        tips.append(
            _specific(f"{t.name}'s thick walls make it susceptible to blossom end rot; keep watering consistent.")
        )

    products = [
        get_product("pepper_fertilizer", f"Balanced organic formula suited to {t.name}'s feeding needs."),
    ]
    if t.is_container_friendly:
        products.append(
            get_product("soaker_hose", "Delivers water directly to roots in containers, reducing disease.")
        )
    else:
        products.append(
            get_product(
                "drip_irrigation_kit",
                f"Drip irrigation keeps {t.name} evenly watered, the main defence against blossom drop and end rot.",
            )
        )
    if t.is_thick_walled:
        products.append(get_product("calcium_supplement", f"Prevents blossom end rot on {t.name}'s thick-walled fruit."))

    return _stage(
        "feeding-care", 5, "Feeding & Care",
        "Watering, fertilizing, and ongoing maintenance",
        paragraphs, tips, products,
    )


def pest_disease(item: Item) -> Stage:
    t = VarietyTraits.from_item(item)
    paragraphs = [
        "The most common pepper pests are aphids clustering on new growth, whiteflies under the leaves and "
        "pepper hornworms. Check plants every few days, since problems caught early are far easier to "
        "manage. A strong spray of water knocks off aphids and insecticidal soap handles most soft-bodied pests.",
        "Watch for bacterial leaf spot (dark, water-soaked spots), powdery mildew (a white coating) and "
        "phytophthora (wilting despite wet soil). Remove affected leaves immediately and avoid overhead "
        "watering, which creates the conditions these diseases love.",
    ]
    if t.disease_notes:
        paragraphs.append(f"Growing note for {t.name}: {t.disease_notes}")
    paragraphs.append(
        "Prevention beats treatment. Water at the base, keep foliage dry, space plants for airflow, rotate "
        "the pepper patch each year away from tomatoes and eggplant, and clear plant debris at season's end."
    )

    tips = [
        _generic("Inspect plants every few days; early detection is key."),
        _generic("Rotate pepper planting location each year; don't follow tomatoes or eggplant."),
        _generic("Remove lower leaves touching soil to prevent splash-borne disease."),
    ]
    if t.is_advanced:
        tips.append(_specific(f"{t.name} requires more attentive disease monitoring than beginner varieties."))
    if t.is_superhot:
        tips.append(_generic("Wear gloves when handling superhot peppers; capsaicin burns skin and eyes."))

    products = [
        get_product("neem_oil", "All-purpose organic spray for aphids, whiteflies, and fungal issues."),
        get_product("insecticidal_soap", "Safe, effective spray for soft-bodied insects on pepper plants."),
    ]
    if t.is_cold_sensitive:
        products.append(get_product("row_covers", "Physical barrier against pests and cold that extends the season too."))

    return _stage(
        "pest-disease", 6, "Pest & Disease Watch",
        "Prevention through good cultural practices",
        paragraphs, tips, products,
    )


def harvesting(item: Item) -> Stage:
    t = VarietyTraits.from_item(item)
    paragraphs = [
        f"Expect your first ripe {t.name} peppers roughly {t.maturity_range} days after transplanting. Most "
        "peppers can be picked at any color stage. Green peppers are simply unripe, and many varieties are "
        "perfectly usable, and milder, when picked green.",
        f"For maximum flavor and heat, wait until {t.name} turns fully {t.final_color}. The color progression "
        f"for this variety is {t.color_progression}. Fully ripe peppers carry more sugar and a more developed "
        "flavor. Cut them from the plant with clean shears or a knife, since pulling can damage branches.",
    ]
    if t.is_superhot:
        paragraphs.append(
            f"Handling warning: {t.name} ranges from {t.heat_range} SHU. Always wear gloves when harvesting and "
            "processing superhot peppers, keep your hands away from your face and wash thoroughly even after "
            "removing gloves. Consider processing outdoors to avoid capsaicin fumes."
        )
    if t.good_for_drying:
        if t.is_thin_walled:
            method = "Its thin walls dry quickly, so you can air-dry the pods strung on a thread in a warm, dry spot."
        else:
            method = "A food dehydrator gives more consistent results than air-drying for thicker-walled peppers."
        paragraphs.append(
            f"{t.name} is excellent for drying. {method} Dried peppers can be ground into powder or flakes, or "
            "stored whole for months."
        )
    if t.good_for_sauce:
        paragraphs.append(
            f"{t.name} is a great choice for hot sauce and fermented pepper products. Chop the peppers, mix with "
            "3-5% salt by weight and pack into a jar. Ferment at room temperature for 1-4 weeks, then blend and "
            "strain for a naturally tangy, complex sauce."
        )

    tips = [
        _generic("Use clean shears to harvest; pulling can damage the plant."),
        _specific(f"Wait for full {t.final_color} color for maximum flavor and heat."),
        _generic("Regular picking encourages the plant to produce more peppers."),
    ]
    if t.is_heavy_yielder:
        tips.append(_specific(f"{t.name} is a heavy producer; plan for preserving, sharing, or selling the surplus."))
    if t.is_superhot:
        tips.append(_generic("Always wear gloves and avoid touching your face when handling superhot peppers."))

    products = [get_product("harvest_basket", "Gentle on fruit and better than bags for preventing bruising.")]
    if t.wants_dehydrator:
        products.append(
            get_product("dehydrator", f"Dry {t.name} into flakes or powder with consistent results at any wall thickness.")
        )
    products.append(
        get_product("compost_bin", "Turn spent pepper plants and kitchen scraps into next season's soil amendment.")
    )

    return _stage(
        "harvesting", 7, "Harvesting & Preserving",
        f"First fruit at ~{t.avg_maturity} days, color stages: {t.color_progression}",
        paragraphs, tips, products,
    )
