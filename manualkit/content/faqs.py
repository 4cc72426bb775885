"""FAQ list operations. Pure functions returning a new list."""

from typing import Optional

from manualkit.core.exceptions import FaqNotFoundError
from manualkit.core.schemas import FaqItem
from manualkit.tree.pages import timestamp_ms


def _index_of(faqs: list[FaqItem], faq_id: str) -> int:
    for i, faq in enumerate(faqs):
        if faq.id == faq_id:
            return i
    raise FaqNotFoundError(faq_id)


def new_faq_id(faqs: list[FaqItem]) -> str:
    taken = {f.id for f in faqs}
    stamp = timestamp_ms()
    while f"faq_{stamp}" in taken:
        stamp += 1
    return f"faq_{stamp}"


def add_faq(faqs: list[FaqItem], question: str, answer: str) -> list[FaqItem]:
    return [*faqs, FaqItem(id=new_faq_id(faqs), question=question, answer=answer)]


def update_faq(
    faqs: list[FaqItem],
    faq_id: str,
    question: Optional[str] = None,
    answer: Optional[str] = None,
) -> list[FaqItem]:
    index = _index_of(faqs, faq_id)
    update = {}
    if question is not None:
        update["question"] = question
    if answer is not None:
        update["answer"] = answer
    return [*faqs[:index], faqs[index].model_copy(update=update), *faqs[index + 1:]]


def delete_faq(faqs: list[FaqItem], faq_id: str) -> list[FaqItem]:
    index = _index_of(faqs, faq_id)
    return [*faqs[:index], *faqs[index + 1:]]
