"""
Packing library seed data.

Categories and items for the global packing library. Bump
PACKING_LIST_VERSION whenever items or matching rules change in a way that
existing trip lists should pick up.
"""

from trailpack.catalog.library import FALLBACK_CATEGORY_ID, build_item
from trailpack.models.catalog import (
    CampingStyle,
    Category,
    ItemTags,
    LibraryItem,
    Precipitation,
    Season,
    TemperatureBand,
    Wind,
)

PACKING_LIST_VERSION = 1

CAR = CampingStyle.CAR_CAMPING
BACKPACKING = CampingStyle.BACKPACKING
RV = CampingStyle.RV
ANY = CampingStyle.ANY

CATEGORIES: tuple[Category, ...] = (
    Category(id="shelter", label="Shelter", sort_order=1, icon="home-outline"),
    Category(id="sleep_system", label="Sleep System", sort_order=2, icon="bed-outline"),
    Category(id="water", label="Water", sort_order=3, icon="water-outline"),
    Category(id="kitchen", label="Kitchen", sort_order=4, icon="restaurant-outline"),
    Category(id="food", label="Food", sort_order=5, icon="fast-food-outline"),
    Category(id="clothing", label="Clothing", sort_order=6, icon="shirt-outline"),
    Category(id="layers_and_warmth", label="Layers & Warmth", sort_order=7, icon="snow-outline"),
    Category(id="rain_and_weather", label="Rain & Weather", sort_order=8, icon="rainy-outline"),
    Category(id="footwear", label="Footwear", sort_order=9, icon="footsteps-outline"),
    Category(id="hygiene", label="Hygiene", sort_order=10, icon="sparkles-outline"),
    Category(id="first_aid", label="First Aid", sort_order=11, icon="medkit-outline"),
    Category(id="navigation_and_safety", label="Navigation & Safety", sort_order=12, icon="compass-outline"),
    Category(id="tools", label="Tools", sort_order=13, icon="construct-outline"),
    Category(id="personal_items", label="Personal Items", sort_order=14, icon="person-outline"),
    Category(id="electronics", label="Electronics", sort_order=15, icon="battery-charging-outline"),
    Category(id="trip_specific", label="Trip Specific", sort_order=16, icon="flag-outline"),
    Category(id=FALLBACK_CATEGORY_ID, label="Other", sort_order=99, icon="ellipsis-horizontal-outline"),
)


def base_tags(*styles: CampingStyle) -> ItemTags:
    """Always included for matching styles."""
    return ItemTags(camping_styles=frozenset(styles or (ANY,)), base=True)


def winter_tags(*styles: CampingStyle) -> ItemTags:
    return ItemTags(
        seasons=frozenset({Season.WINTER}),
        temperature_bands=frozenset({TemperatureBand.BELOW_FREEZING, TemperatureBand.COLD}),
        camping_styles=frozenset(styles or (ANY,)),
    )


def cold_tags(*styles: CampingStyle) -> ItemTags:
    """Like winter_tags, but also relevant in the shoulder season."""
    return ItemTags(
        seasons=frozenset({Season.WINTER, Season.SHOULDER}),
        temperature_bands=frozenset({TemperatureBand.BELOW_FREEZING, TemperatureBand.COLD}),
        camping_styles=frozenset(styles or (ANY,)),
    )


def rain_tags(*styles: CampingStyle) -> ItemTags:
    return ItemTags(
        precipitation=frozenset({Precipitation.RAIN}),
        camping_styles=frozenset(styles or (ANY,)),
    )


def snow_tags(*styles: CampingStyle) -> ItemTags:
    return ItemTags(
        seasons=frozenset({Season.WINTER}),
        temperature_bands=frozenset({TemperatureBand.BELOW_FREEZING}),
        precipitation=frozenset({Precipitation.SNOW}),
        camping_styles=frozenset(styles or (ANY,)),
    )


def hot_tags(*styles: CampingStyle) -> ItemTags:
    return ItemTags(
        seasons=frozenset({Season.SUMMER}),
        temperature_bands=frozenset({TemperatureBand.HOT, TemperatureBand.MILD}),
        camping_styles=frozenset(styles or (ANY,)),
    )


def windy_tags(*styles: CampingStyle) -> ItemTags:
    return ItemTags(
        wind=frozenset({Wind.WINDY}),
        camping_styles=frozenset(styles or (ANY,)),
    )


ITEMS: tuple[LibraryItem, ...] = (
    # Shelter
    build_item("Tent", "shelter", 5, base_tags(CAR, BACKPACKING)),
    build_item("Tent stakes", "shelter", 4, base_tags(CAR, BACKPACKING), default_qty=8),
    build_item("Rain fly", "shelter", 4, base_tags(CAR, BACKPACKING)),
    build_item("Ground tarp / footprint", "shelter", 3, base_tags(CAR, BACKPACKING)),
    build_item("Tent repair kit", "shelter", 2, base_tags(BACKPACKING)),
    build_item("4-season tent", "shelter", 5, winter_tags(BACKPACKING, CAR), notes="Required for winter camping"),
    build_item("Snow stakes or deadman anchors", "shelter", 3, snow_tags(BACKPACKING, CAR)),
    build_item("Extra guylines", "shelter", 3, windy_tags()),
    build_item("Windbreak / tarp", "shelter", 3, windy_tags(CAR)),
    # Sleep system
    build_item("Sleeping bag", "sleep_system", 5, base_tags()),
    build_item("Sleeping pad", "sleep_system", 5, base_tags()),
    build_item("Pillow", "sleep_system", 2, base_tags(CAR)),
    build_item(
        "Cold-weather sleeping bag (0-20°F)", "sleep_system", 5, winter_tags(), notes="Critical for winter camping"
    ),
    build_item("Insulated sleeping pad (R4+)", "sleep_system", 5, winter_tags(), notes="R-value of 4+ for winter"),
    build_item("Backup foam pad", "sleep_system", 3, winter_tags(BACKPACKING)),
    build_item("Sleeping bag liner", "sleep_system", 3, cold_tags(), notes="Adds 10-15°F warmth"),
    build_item("Hot water bottle", "sleep_system", 2, winter_tags(), notes="Fill with hot water before bed"),
    # Water
    build_item("Water bottles", "water", 5, base_tags(), default_qty=2),
    build_item("Water filter", "water", 4, base_tags(BACKPACKING)),
    build_item("Water purification tablets", "water", 3, base_tags(BACKPACKING)),
    build_item("Insulated water bottle sleeve", "water", 3, winter_tags(), notes="Prevents freezing"),
    build_item("Wide-mouth water bottles", "water", 3, winter_tags(), notes="Less likely to freeze shut"),
    # Kitchen
    build_item("Camp stove", "kitchen", 4, base_tags()),
    build_item("Fuel", "kitchen", 4, base_tags()),
    build_item("Lighter", "kitchen", 5, base_tags()),
    build_item("Backup fire starter", "kitchen", 3, base_tags()),
    build_item("Cookware / pot", "kitchen", 4, base_tags()),
    build_item("Utensils / spork", "kitchen", 4, base_tags()),
    build_item("Plates / bowls", "kitchen", 3, base_tags(CAR)),
    build_item("Cooler", "kitchen", 4, base_tags(CAR, RV)),
    build_item("Trash bags", "kitchen", 4, base_tags(), default_qty=3),
    build_item("Dish soap", "kitchen", 2, base_tags(CAR)),
    build_item("Sponge", "kitchen", 2, base_tags(CAR)),
    build_item("Insulated mug", "kitchen", 3, winter_tags(), notes="Keeps drinks hot"),
    build_item("Thermos", "kitchen", 3, winter_tags(), notes="For hot drinks on the trail"),
    build_item("Windscreen for stove", "kitchen", 4, windy_tags(), notes="Essential in windy conditions"),
    build_item("Cold-weather fuel", "kitchen", 4, winter_tags(BACKPACKING), notes="Isobutane struggles below 20°F"),
    # Food
    build_item("Breakfasts", "food", 4, base_tags(), notes="Plan per number of nights + 1"),
    build_item("Lunches / trail food", "food", 4, base_tags()),
    build_item("Dinners", "food", 4, base_tags(), notes="Plan per number of nights"),
    build_item("Snacks", "food", 3, base_tags()),
    build_item("Coffee / tea", "food", 2, base_tags()),
    build_item("High-calorie snacks", "food", 4, winter_tags(), notes="Body burns more calories in cold"),
    build_item("Hot drink packets", "food", 3, winter_tags(), notes="Hot cocoa, cider, tea"),
    build_item("Extra food rations", "food", 3, winter_tags(), notes="Plan extra for cold weather"),
    build_item("Electrolyte powder", "food", 3, hot_tags(), notes="Prevent dehydration"),
    # Clothing
    build_item("Hiking pants", "clothing", 4, base_tags()),
    build_item("Hiking shorts", "clothing", 3, hot_tags()),
    build_item("T-shirts / hiking shirts", "clothing", 4, base_tags(), default_qty=2),
    build_item("Underwear", "clothing", 4, base_tags(), default_qty=3),
    build_item("Socks", "clothing", 4, base_tags(), default_qty=3),
    build_item("Sleepwear", "clothing", 2, base_tags()),
    # Layers & warmth
    build_item(
        "Base layer top (wool or synthetic)", "layers_and_warmth", 5, cold_tags(), notes="Moisture-wicking, never cotton"
    ),
    build_item("Base layer bottom", "layers_and_warmth", 5, cold_tags()),
    build_item("Mid layer / fleece", "layers_and_warmth", 4, cold_tags()),
    build_item(
        "Insulated jacket (down or synthetic)", "layers_and_warmth", 5, winter_tags(), notes="Your main warmth layer"
    ),
    build_item("Puffy vest", "layers_and_warmth", 3, cold_tags()),
    build_item("Warm hat / beanie", "layers_and_warmth", 5, winter_tags(), notes="Lose 40% of heat through head"),
    build_item("Gloves", "layers_and_warmth", 4, cold_tags()),
    build_item("Liner gloves", "layers_and_warmth", 3, winter_tags(), notes="For camp tasks in cold"),
    build_item(
        "Insulated gloves / mittens", "layers_and_warmth", 4, winter_tags(), notes="Mittens are warmer than gloves"
    ),
    build_item("Neck gaiter / buff", "layers_and_warmth", 4, cold_tags()),
    build_item("Balaclava", "layers_and_warmth", 3, winter_tags(), notes="Full face protection in extreme cold"),
    build_item("Hand warmers", "layers_and_warmth", 2, winter_tags(), default_qty=4),
    build_item("Toe warmers", "layers_and_warmth", 2, winter_tags(), default_qty=2),
    build_item(
        "Extra wool socks", "layers_and_warmth", 4, winter_tags(), default_qty=2, notes="Keep dry socks for sleeping"
    ),
    # Rain & weather
    build_item("Rain jacket", "rain_and_weather", 4, rain_tags()),
    build_item("Rain pants", "rain_and_weather", 3, rain_tags()),
    build_item("Pack cover", "rain_and_weather", 3, rain_tags(BACKPACKING)),
    build_item("Dry bags", "rain_and_weather", 3, rain_tags(), default_qty=2),
    build_item("Waterproof pack liner", "rain_and_weather", 3, rain_tags(BACKPACKING)),
    build_item("Extra tarp", "rain_and_weather", 2, rain_tags(CAR)),
    build_item("Windproof jacket", "rain_and_weather", 4, windy_tags()),
    # Footwear
    build_item("Hiking boots", "footwear", 5, base_tags()),
    build_item("Camp shoes / sandals", "footwear", 2, base_tags(CAR)),
    build_item("Insulated boots", "footwear", 5, winter_tags(), notes="Rated for expected temperatures"),
    build_item("Gaiters", "footwear", 4, snow_tags(), notes="Keep snow out of boots"),
    build_item("Boot dryers / extra insoles", "footwear", 2, winter_tags()),
    # Hygiene
    build_item("Toothbrush", "hygiene", 4, base_tags()),
    build_item("Toothpaste", "hygiene", 4, base_tags()),
    build_item("Toilet paper", "hygiene", 4, base_tags()),
    build_item("Hand sanitizer", "hygiene", 4, base_tags()),
    build_item("Trowel", "hygiene", 3, base_tags(BACKPACKING)),
    build_item("Waste bags", "hygiene", 3, base_tags(BACKPACKING)),
    build_item("Biodegradable soap", "hygiene", 2, base_tags()),
    build_item("Towel", "hygiene", 2, base_tags()),
    # First aid
    build_item("First aid kit", "first_aid", 5, base_tags()),
    build_item("Blister care / moleskin", "first_aid", 4, base_tags(BACKPACKING)),
    build_item("Personal medications", "first_aid", 5, base_tags()),
    build_item("Sunscreen", "first_aid", 3, hot_tags()),
    build_item("Lip balm with SPF", "first_aid", 3, base_tags()),
    build_item("Bug spray", "first_aid", 3, hot_tags()),
    build_item("Hand/skin repair cream", "first_aid", 3, winter_tags(), notes="For cracked/dry skin"),
    # Navigation & safety
    build_item("Headlamp", "navigation_and_safety", 5, base_tags()),
    build_item("Extra batteries", "navigation_and_safety", 4, base_tags()),
    build_item("Backup light source", "navigation_and_safety", 3, base_tags()),
    build_item("Map / offline maps", "navigation_and_safety", 4, base_tags(BACKPACKING)),
    build_item("Compass", "navigation_and_safety", 3, base_tags(BACKPACKING)),
    build_item("Whistle", "navigation_and_safety", 4, base_tags()),
    build_item("Emergency blanket", "navigation_and_safety", 3, base_tags()),
    build_item(
        "Extra batteries (cold drains faster)", "navigation_and_safety", 4, winter_tags(), notes="Keep warm in pocket"
    ),
    # Tools
    build_item("Multi-tool / knife", "tools", 4, base_tags()),
    build_item("Duct tape", "tools", 3, base_tags()),
    build_item("Rope / paracord", "tools", 3, base_tags()),
    build_item("Trekking poles", "tools", 3, base_tags(BACKPACKING)),
    # Personal items
    build_item("ID / wallet", "personal_items", 5, base_tags()),
    build_item("Phone", "personal_items", 4, base_tags()),
    build_item("Cash", "personal_items", 2, base_tags()),
    build_item("Campsite reservation", "personal_items", 4, base_tags()),
    build_item("Sunglasses", "personal_items", 3, base_tags()),
    # Electronics
    build_item("Phone charger", "electronics", 3, base_tags()),
    build_item("Portable battery pack", "electronics", 3, base_tags()),
    build_item("Camera", "electronics", 2, base_tags()),
    build_item("Extra power bank", "electronics", 3, winter_tags(), notes="Cold drains batteries faster"),
    # Car camping
    build_item("Camp chairs", "trip_specific", 3, base_tags(CAR), default_qty=2),
    build_item("Camp table", "trip_specific", 2, base_tags(CAR)),
    build_item("Lantern", "trip_specific", 3, base_tags(CAR)),
    build_item("Firewood / fire starter", "trip_specific", 2, base_tags(CAR)),
    # Backpacking
    build_item("Backpack", "trip_specific", 5, base_tags(BACKPACKING)),
    build_item("Bear canister / bag", "trip_specific", 4, base_tags(BACKPACKING), notes="Required in many areas"),
    build_item("Permit", "trip_specific", 5, base_tags(BACKPACKING), notes="Check if required"),
)
