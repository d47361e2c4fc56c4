from scanbite.models import Tip

TIPS = [
    Tip(
        title="Properly Wash Apples",
        description="Remove pesticide residue by soaking apples in a solution of baking soda and water for 12-15 minutes.",
        category="cleaning",
        image="https://i.postimg.cc/5yn4wsvc/download.jpg",
    ),
    Tip(
        title="Clean Leafy Greens",
        description="Swish leafy greens in a large bowl of cold water, then lift them out to leave grit behind. Repeat if necessary.",
        category="cleaning",
        image="https://i.postimg.cc/fTg3pfqW/fresh-vegetables-wash-sink-600nw-363345332.webp",
    ),
    Tip(
        title="Detoxify Berries",
        description="Gently rinse berries in a diluted vinegar solution (1 part vinegar to 3 parts water) to remove mold and bacteria.",
        category="safety",
        image="https://i.postimg.cc/NGyX7VjG/download.jpg",
    ),
    Tip(
        title="Storing Vegetables for Freshness",
        description="Learn optimal storage methods for different types of vegetables to maintain their freshness and nutritional value longer.",
        category="storage",
        image="https://i.postimg.cc/CMNQVRV6/images.jpg",
    ),
    Tip(
        title="Understanding Food Labels",
        description="A quick guide to deciphering common terms on food labels like 'organic', 'natural', and 'non-GMO'.",
        category="info",
        image="https://i.postimg.cc/QN2qB5rM/download.jpg",
    ),
    Tip(
        title="Reducing Food Waste",
        description="Smart tips on meal planning, proper storage, and using leftovers to minimize food waste at home.",
        category="storage",
        image="https://i.postimg.cc/Zn2snDxY/download.jpg",
    ),
]


def get_tips(category: str = None) -> list:
    if not category:
        return list(TIPS)
    return [t for t in TIPS if t.category == category.lower()]
