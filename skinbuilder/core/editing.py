"""Project edits. Every operation returns a new Project."""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Optional

from .models import Message, Project, new_id
from .variants import apply_variant, variant_spec

logger = logging.getLogger(__name__)


def switch_variant(project: Project, variant: str) -> Project:
    """Change the variant and fill the defaults it needs."""
    variant_spec(variant)
    settings = apply_variant(project.settings, variant, project.first_message)
    if variant == project.variant and settings is project.settings:
        return project
    logger.info("Switching variant %s -> %s", project.variant, variant)
    return replace(project, variant=variant, settings=settings)


def update_settings(project: Project, **fields: object) -> Project:
    """Change shared settings such as ``sender_color`` or ``watermark``."""
    return replace(project, settings=replace(project.settings, **fields))


def update_options(project: Project, block: str, **fields: object) -> Project:
    """Change fields of one option block, e.g. ``update_options(p, "twitter", likes=3)``."""
    current = project.settings.options(block)
    settings = replace(project.settings, **{block: replace(current, **fields)})
    return replace(project, settings=settings)


def new_message(project: Project, content: str = "", outgoing: Optional[bool] = None) -> Message:
    """Build a message that alternates sides with the last one."""
    last = project.messages[-1] if project.messages else None
    if outgoing is None:
        outgoing = not last.outgoing if last is not None else True
    sender = "You" if outgoing else "Them"
    for message in reversed(project.messages):
        if message.outgoing == outgoing and message.sender:
            sender = message.sender
            break
    return Message(id=new_id(), sender=sender, content=content, outgoing=outgoing)


def add_message(project: Project, message: Optional[Message] = None, index: Optional[int] = None) -> Project:
    if message is None:
        message = new_message(project)
    messages = list(project.messages)
    if index is None:
        messages.append(message)
    else:
        messages.insert(index, message)
    return replace(project, messages=tuple(messages))


def _index_of(project: Project, message_id: str) -> Optional[int]:
    for index, message in enumerate(project.messages):
        if message.id == message_id:
            return index
    logger.debug("No message with id %s", message_id)
    return None


def update_message(project: Project, message_id: str, **fields: object) -> Project:
    index = _index_of(project, message_id)
    if index is None:
        return project
    messages = list(project.messages)
    messages[index] = replace(messages[index], **fields)
    return replace(project, messages=tuple(messages))


def remove_message(project: Project, message_id: str) -> Project:
    index = _index_of(project, message_id)
    if index is None:
        return project
    return replace(project, messages=project.messages[:index] + project.messages[index + 1:])


def move_message(project: Project, message_id: str, offset: int) -> Project:
    """Move a message ``offset`` places; the target index is clamped to the list."""
    index = _index_of(project, message_id)
    if index is None:
        return project
    target = max(0, min(len(project.messages) - 1, index + offset))
    if target == index:
        return project
    messages = list(project.messages)
    messages.insert(target, messages.pop(index))
    return replace(project, messages=tuple(messages))
