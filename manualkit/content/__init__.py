"""Manual Kit Content — whole-document store, FAQ operations, seed data."""

from .store import ContentStore, FAQS_DOCUMENT, PAGES_DOCUMENT
from .faqs import add_faq, delete_faq, update_faq

__all__ = [
    "ContentStore",
    "PAGES_DOCUMENT",
    "FAQS_DOCUMENT",
    "add_faq",
    "update_faq",
    "delete_faq",
]
