from .auth import AuthService
from .contact import ContactForm, ContactResult, submit_contact, validate_contact
from .database import DatabaseReport, DbManageService, DbSessionService, inspect_database
from .placeholder_client import PlaceholderClient, PlaceholderUser, Post
from .products import ProductService, generate_products, sample_products

__all__ = [
    "AuthService",
    "ContactForm",
    "ContactResult",
    "DatabaseReport",
    "DbManageService",
    "DbSessionService",
    "PlaceholderClient",
    "PlaceholderUser",
    "Post",
    "ProductService",
    "generate_products",
    "inspect_database",
    "sample_products",
    "submit_contact",
    "validate_contact",
]
