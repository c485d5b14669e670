"""Demo catalog generator with deterministic seeding.

Generates categories, tags and products with synthetic names, prices,
category/tag assignments and photos. Uses seeded random for
reproducibility.
"""

import hashlib
import random
from collections.abc import Iterator
from dataclasses import dataclass, field

from catalog_api.domain.entities import Category, Photo, Product, Tag
from catalog_api.domain.value_objects import Price


# ============================================================================
# Constants
# ============================================================================

# Synthetic brand names (fictional companies)
BRANDS = [
    "Acme",
    "Contoso",
    "Northwind",
    "Fabrikam",
    "Tailwind",
    "Globex",
    "Initech",
    "Umbrella",
]

ADJECTIVES = [
    "Premium",
    "Classic",
    "Essential",
    "Smart",
    "Flex",
    "Prime",
    "Nova",
    "Titan",
]

# (name, min price, max price, name templates)
CATEGORIES: list[tuple[str, int, int, list[str]]] = [
    ("Laptops", 59999, 199999, ["{brand} {adj} Laptop 15\"", "{brand} Notebook {adj}"]),
    ("Headphones", 2999, 39999, ["{brand} {adj} Headphones", "{brand} Wireless {adj} Earbuds"]),
    ("T-Shirts", 1999, 4999, ["{brand} {adj} T-Shirt", "{brand} Cotton {adj} Shirt"]),
    ("Office Chairs", 19999, 89999, ["{brand} {adj} Office Chair", "{brand} Ergonomic {adj} Chair"]),
    ("Board Games", 1999, 6999, ["{brand} {adj} Board Game", "{brand} Strategy {adj}"]),
    ("Coffee Makers", 4999, 29999, ["{brand} {adj} Coffee Maker", "{brand} Brew {adj} System"]),
    ("Backpacks", 3999, 14999, ["{brand} {adj} Backpack", "{brand} Travel {adj} Pack"]),
    ("Gifts", 999, 9999, ["{brand} {adj} Gift Set"]),
]

TAGS = [
    "new",
    "bestseller",
    "sale",
    "eco",
    "limited",
    "gift idea",
]

PHOTO_EXTENSIONS = ["jpg", "png", "webp"]


# ============================================================================
# Generator Configuration
# ============================================================================


@dataclass
class GeneratorConfig:
    """Configuration for catalog generation.

    Attributes:
        seed: Random seed for reproducibility.
        products_per_category: Number of products per category.
        max_extra_categories: Max additional categories per product.
        max_tags: Max tags per product.
        photo_ratio: Share of products that get a main photo.
        discount_ratio: Share of products that get an old price.
    """

    seed: int = 42
    products_per_category: int = 10
    max_extra_categories: int = 2
    max_tags: int = 3
    photo_ratio: float = 0.8
    discount_ratio: float = 0.3

    @classmethod
    def small(cls) -> "GeneratorConfig":
        """Create config for small catalog (~40 products)."""
        return cls(seed=42, products_per_category=5)

    @classmethod
    def full(cls) -> "GeneratorConfig":
        """Create config for full catalog (~200 products)."""
        return cls(seed=42, products_per_category=25)


@dataclass
class GeneratedCatalog:
    """Result of a generator run."""

    categories: list[Category] = field(default_factory=list)
    tags: list[Tag] = field(default_factory=list)
    products: list[Product] = field(default_factory=list)


# ============================================================================
# Catalog Generator
# ============================================================================


class CatalogGenerator:
    """Generates demo catalogs with deterministic seeding.

    Example usage:
        catalog = CatalogGenerator(GeneratorConfig.small()).generate()
        for product in catalog.products:
            print(product.name)
    """

    def __init__(self, config: GeneratorConfig) -> None:
        """Initialize generator with configuration.

        Args:
            config: Generator configuration.
        """
        self.config = config
        self.categories = [Category(id=i, name=name) for i, (name, *_) in enumerate(CATEGORIES, 1)]
        self.tags = [Tag(id=i, name=name) for i, name in enumerate(TAGS, 1)]

    def _deterministic_seed(self, *args: str | int) -> int:
        """Create deterministic seed from arguments.

        Args:
            args: Values to include in seed.

        Returns:
            Deterministic integer seed.
        """
        data = "|".join(str(a) for a in args)
        hash_bytes = hashlib.md5(data.encode()).digest()
        return int.from_bytes(hash_bytes[:4], "big")

    def _generate_code(self, category: Category, index: int) -> str:
        """Generate product code.

        Args:
            category: Primary category.
            index: Product index within category.

        Returns:
            Code string, e.g. "LAP-0001-003".
        """
        prefix = "".join(c for c in category.name if c.isalpha())[:3].upper() or "PRD"
        return f"{prefix}-{category.id:04d}-{index:03d}"

    def _generate_product(self, product_id: int, position: int, index: int) -> Product:
        """Generate a single product.

        Args:
            product_id: Identifier to assign.
            position: Index of the primary category in CATEGORIES.
            index: Product index within the category.

        Returns:
            Generated Product.
        """
        rng = random.Random(self._deterministic_seed(self.config.seed, position, index))

        category = self.categories[position]
        _, min_price, max_price, templates = CATEGORIES[position]

        brand = rng.choice(BRANDS)
        adj = rng.choice(ADJECTIVES)
        name = rng.choice(templates).format(brand=brand, adj=adj)

        # Round to .99
        price_new = (rng.randint(min_price, max_price) // 100) * 100 + 99
        price_old = None
        if rng.random() < self.config.discount_ratio:
            price_old = price_new + (rng.randint(5, 30) * price_new) // 100

        others = [c for c in self.categories if c.id != category.id]
        extra = rng.sample(others, rng.randint(0, self.config.max_extra_categories))
        tags = rng.sample(self.tags, rng.randint(0, self.config.max_tags))

        photo = None
        if rng.random() < self.config.photo_ratio:
            photo = Photo(id=product_id, file=f"{brand.lower()}-{product_id}.{rng.choice(PHOTO_EXTENSIONS)}")

        return Product(
            id=product_id,
            code=self._generate_code(category, index),
            name=name,
            description=f"{category.name} from {brand}. Part of our {adj.lower()} collection.",
            category=category,
            categories=tuple(sorted(extra, key=lambda c: c.id)),
            tags=tuple(sorted(tags, key=lambda t: t.id)),
            price=Price(new=price_new, old=price_old),
            main_photo=photo,
        )

    def generate_products(self) -> Iterator[Product]:
        """Generate all products.

        Yields:
            Generated Product instances with sequential ids.
        """
        product_id = 0
        for position in range(len(self.categories)):
            for index in range(self.config.products_per_category):
                product_id += 1
                yield self._generate_product(product_id, position, index)

    def generate(self) -> GeneratedCatalog:
        """Generate the full catalog.

        Returns:
            Categories, tags and products.
        """
        return GeneratedCatalog(
            categories=list(self.categories),
            tags=list(self.tags),
            products=list(self.generate_products()),
        )

    @property
    def expected_count(self) -> int:
        """Get expected number of products."""
        return len(self.categories) * self.config.products_per_category
