"""Manual Kit custom exceptions."""


class ManualKitError(Exception):
    """Base exception for all Manual Kit errors."""


class NotFoundError(ManualKitError):
    """A path or id does not resolve to an existing item."""


class PageNotFoundError(NotFoundError):
    """A page path does not resolve to a page in the forest."""

    def __init__(self, path: list[str]):
        self.path = list(path)
        super().__init__(f"Page not found: {'/'.join(self.path) or '(empty path)'}")


class BlockNotFoundError(NotFoundError):
    """A content block id is not present on the page."""

    def __init__(self, block_id: str):
        self.block_id = block_id
        super().__init__(f"Content block not found: {block_id}")


class FaqNotFoundError(NotFoundError):
    """An FAQ id is not present in the FAQ list."""

    def __init__(self, faq_id: str):
        self.faq_id = faq_id
        super().__init__(f"FAQ not found: {faq_id}")


class ValidationError(ManualKitError):
    """Input violates a content invariant."""


class DuplicatePageError(ValidationError):
    """A sibling list already holds a page with the same id."""

    def __init__(self, page_id: str):
        self.page_id = page_id
        super().__init__(f"A sibling page with id '{page_id}' already exists")


class CategoryPageError(ValidationError):
    """A category page (no content list) cannot hold content blocks."""

    def __init__(self, page_id: str):
        self.page_id = page_id
        super().__init__(f"Page '{page_id}' is a category page and has no content blocks")


class StorageError(ManualKitError):
    """Error with content or media storage operations."""


class VersionConflictError(StorageError):
    """A whole-document write lost the race against another writer."""

    def __init__(self, name: str, expected: int, actual: int):
        self.name = name
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Document '{name}' was modified concurrently "
            f"(expected version {expected}, found {actual})"
        )


class LLMError(ManualKitError):
    """Error communicating with an LLM provider."""


class LLMMaxRetriesError(LLMError):
    """Maximum retries exceeded for an LLM API call."""


class ConfigurationError(ManualKitError):
    """Error with configuration loading or validation."""
