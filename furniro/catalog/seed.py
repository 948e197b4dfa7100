"""
Sample records loaded into a fresh ``CatalogStore``.

Entries use the wire (camelCase) spelling and are validated into
``Product`` / ``BlogPost`` instances by ``load_products()`` and
``load_blog_posts()``. Each call returns new instances so that stores
never share mutable records.
"""

from typing import Any, Dict, List

from .schemas import BlogPost, Product

SAMPLE_PRODUCTS: List[Dict[str, Any]] = [
    {
        "id": "1",
        "name": "Syltherine",
        "description": "Stylish cafe chair",
        "price": 2500000,
        "originalPrice": 3500000,
        "discount": 30,
        "category": "Dining",
        "brand": "Furniro",
        "image": "/images/inside-weather.jpg",
        "rating": 4.5,
        "reviews": 120,
        "badge": "sale",
        "sku": "SS001",
        "tags": ["Sofa", "Chair", "Home", "Shop"],
        "inStock": True,
    },
    {
        "id": "2",
        "name": "Leviosa",
        "description": "Stylish cafe chair",
        "price": 2500000,
        "originalPrice": None,
        "discount": 0,
        "category": "Dining",
        "brand": "Furniro",
        "image": "/images/phillip.jpg",
        "rating": 4.7,
        "reviews": 204,
        "badge": None,
        "sku": "SS002",
        "tags": ["Sofa", "Chair", "Home", "Shop"],
        "inStock": True,
    },
    {
        "id": "3",
        "name": "Lolito",
        "description": "Luxury big sofa",
        "price": 7000000,
        "originalPrice": 14000000,
        "discount": 50,
        "category": "Living",
        "brand": "Furniro",
        "image": "/images/hutomo.jpg",
        "rating": 4.3,
        "reviews": 89,
        "badge": "sale",
        "sku": "SS003",
        "tags": ["Sofa", "Living", "Home", "Shop"],
        "inStock": True,
    },
]

SAMPLE_BLOG_POSTS: List[Dict[str, Any]] = [
    {
        "id": "1",
        "title": "Going all-in with millennial design",
        "excerpt": "Discover how millennial design principles are transforming modern furniture. Learn about the key elements that make furniture appealing to younger generations.",
        "content": "Full blog post content about millennial design trends, including sustainable materials, minimalist aesthetics, and multifunctional pieces...",
        "author": "Sarah Johnson",
        "date": "2022-10-14",
        "category": "Design",
        "image": "/images/blog1.jpg",
        "tags": ["design", "millennial", "furniture"],
    },
    {
        "id": "2",
        "title": "Exploring new ways of decorating",
        "excerpt": "Transform your living space with innovative decorating techniques. From color psychology to space optimization, discover fresh ideas for your home.",
        "content": "Complete guide to modern decorating techniques, including color schemes, lighting, and furniture arrangement...",
        "author": "Michael Chen",
        "date": "2022-10-10",
        "category": "Interior",
        "image": "/images/blog2.jpg",
        "tags": ["decorating", "interior", "design"],
    },
    {
        "id": "3",
        "title": "Handmade pieces that took time to make",
        "excerpt": "Celebrate the art of handcrafted furniture. Learn about traditional techniques and the value of artisan-made pieces in our modern world.",
        "content": "In-depth look at traditional furniture making techniques and the stories behind handcrafted pieces...",
        "author": "Emily Rodriguez",
        "date": "2022-10-05",
        "category": "Handmade",
        "image": "/images/blog3.jpg",
        "tags": ["handmade", "crafts", "furniture"],
    },
    {
        "id": "4",
        "title": "Modern home in Milan",
        "excerpt": "Take a tour of a stunning modern home in Milan that perfectly balances contemporary design with Italian elegance.",
        "content": "Detailed case study of a modern Milanese home, featuring contemporary furniture and innovative design solutions...",
        "author": "Alessandro Rossi",
        "date": "2022-09-28",
        "category": "Design",
        "image": "https://via.placeholder.com/600x400/FF6347/FFFFFF?text=Milan+Home",
        "tags": ["modern", "milan", "interior"],
    },
    {
        "id": "5",
        "title": "Colorful office redesign",
        "excerpt": "See how a drab office space was transformed into an inspiring workplace using bold colors and creative furniture solutions.",
        "content": "Before and after case study of an office redesign project, focusing on color psychology and productivity...",
        "author": "Jessica Park",
        "date": "2022-09-20",
        "category": "Interior",
        "image": "https://via.placeholder.com/600x400/32CD32/FFFFFF?text=Office+Design",
        "tags": ["office", "color", "productivity"],
    },
    {
        "id": "6",
        "title": "Sustainable furniture materials",
        "excerpt": "Learn about eco-friendly materials that are revolutionizing the furniture industry and how to choose sustainable options.",
        "content": "Comprehensive guide to sustainable furniture materials, including bamboo, reclaimed wood, and recycled materials...",
        "author": "David Green",
        "date": "2022-09-15",
        "category": "Wood",
        "image": "https://via.placeholder.com/600x400/2E8B57/FFFFFF?text=Sustainable+Materials",
        "tags": ["sustainable", "eco-friendly", "materials"],
    },
    {
        "id": "7",
        "title": "Small space furniture solutions",
        "excerpt": "Maximize your small living space with clever furniture choices and space-saving design techniques.",
        "content": "Practical tips for furnishing small spaces, including multifunctional furniture and storage solutions...",
        "author": "Lisa Wang",
        "date": "2022-09-08",
        "category": "Design",
        "image": "https://via.placeholder.com/600x400/FF69B4/FFFFFF?text=Small+Spaces",
        "tags": ["small-space", "multifunctional", "storage"],
    },
    {
        "id": "8",
        "title": "Vintage furniture restoration",
        "excerpt": "Bring old furniture back to life with professional restoration techniques and creative upcycling ideas.",
        "content": "Step-by-step guide to furniture restoration, including cleaning, repairing, and refinishing techniques...",
        "author": "Robert Smith",
        "date": "2022-09-01",
        "category": "Crafts",
        "image": "https://via.placeholder.com/600x400/8B4513/FFFFFF?text=Vintage+Restoration",
        "tags": ["vintage", "restoration", "upcycling"],
    },
]


def load_products() -> List[Product]:
    return [Product.model_validate(entry) for entry in SAMPLE_PRODUCTS]


def load_blog_posts() -> List[BlogPost]:
    return [BlogPost.model_validate(entry) for entry in SAMPLE_BLOG_POSTS]
