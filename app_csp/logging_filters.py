from __future__ import annotations
import logging


class LogTagsFilter(logging.Filter):
    """
    Добавляет record.tags_label ("[tag1,tag2]") для форматтера.
    Теги приходят из extra={"tags": [...]}; у записей без тегов пустая строка.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        tags = getattr(record, "tags", None) or ()
        record.tags_label = f"[{','.join(tags)}]" if tags else ""
        return True
