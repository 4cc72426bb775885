from manualkit.api.routes.auth import router as auth_router
from manualkit.api.routes.users import router as users_router
from manualkit.api.routes.pages import router as pages_router
from manualkit.api.routes.faqs import router as faqs_router
from manualkit.api.routes.search import router as search_router
from manualkit.api.routes.suggestions import router as suggestions_router
from manualkit.api.routes.media import router as media_router
from manualkit.api.routes.assistant import router as assistant_router

__all__ = [
    "auth_router",
    "users_router",
    "pages_router",
    "faqs_router",
    "search_router",
    "suggestions_router",
    "media_router",
    "assistant_router",
]
