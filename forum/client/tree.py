"""Client-side comment tree reconciliation.

The client materializes a thread one level at a time: a page of root
comments first, then a page of children each time the reader expands a
comment. These functions splice fetched pages and local mutations into
the tree without duplicating or losing nodes.

A tree is a tuple of root ``Reply`` nodes. Every function is pure: it
returns a new tree that rebuilds only the path from the root to the node
it touched and shares every other subtree with the input. When nothing
changes the input tree object itself is returned.
"""

from typing import Callable, Iterable, Iterator, Sequence

from pydantic import BaseModel, ConfigDict

from forum.domain.value import ParentType, UtcDateTime


class Reply(BaseModel):
    """A comment as the client holds it.

    ``children`` stays empty until the comment is expanded, and holds
    direct replies newest first once it is.
    """

    model_config = ConfigDict(frozen=True)

    comment_id: str
    post_id: str
    parent_id: str
    parent_type: ParentType
    comment: str
    uid: str
    replies: int = 0
    likes: int = 0
    created_at: UtcDateTime
    is_liked: bool = False
    children: tuple["Reply", ...] = ()


Tree = tuple[Reply, ...]


def _newest_first(replies: Iterable[Reply]) -> Tree:
    # created_at DESC, comment_id ASC; the second sort is stable
    by_id = sorted(replies, key=lambda r: r.comment_id)
    return tuple(sorted(by_id, key=lambda r: r.created_at, reverse=True))


def _merge(level: Tree, fetched: Sequence[Reply]) -> Tree:
    """Merge fetched replies into one level, keeping nodes already held."""
    held = {r.comment_id for r in level}
    fresh = [r for r in fetched if r.comment_id not in held]
    if not fresh:
        return level
    unique: dict[str, Reply] = {}
    for reply in fresh:
        unique.setdefault(reply.comment_id, reply)
    return _newest_first((*level, *unique.values()))


def update_nested_comments(
    tree: Tree, target_id: str, update_fn: Callable[[Reply], Reply]
) -> Tree:
    """Replace the node ``target_id`` with ``update_fn(node)``.

    Searches depth first through every materialized level.

    Args:
        tree: Root level of the thread
        target_id: Comment to update
        update_fn: Produces the replacement node

    Returns:
        The updated tree, or ``tree`` itself if the target is not held or
        ``update_fn`` returned the node unchanged
    """
    for index, node in enumerate(tree):
        if node.comment_id == target_id:
            replaced = update_fn(node)
            if replaced is node:
                return tree
        elif node.children:
            children = update_nested_comments(node.children, target_id, update_fn)
            if children is node.children:
                continue
            replaced = node.model_copy(update={"children": children})
        else:
            continue
        return (*tree[:index], replaced, *tree[index + 1 :])
    return tree


def add_comment_reply(tree: Tree, parent_id: str, reply: Reply) -> Tree:
    """Put a freshly created reply at the front of its parent's children."""

    def _add(parent: Reply) -> Reply:
        if any(c.comment_id == reply.comment_id for c in parent.children):
            return parent
        return parent.model_copy(
            update={
                "children": (reply, *parent.children),
                "replies": parent.replies + 1,
            }
        )

    return update_nested_comments(tree, parent_id, _add)


def add_comment_replies(tree: Tree, parent_id: str, replies: Sequence[Reply]) -> Tree:
    """Merge a fetched page of a comment's children into the tree.

    Children already held are kept as they are (with whatever they have
    expanded beneath them); the level stays newest first.
    """

    def _add(parent: Reply) -> Reply:
        children = _merge(parent.children, replies)
        if children is parent.children:
            return parent
        return parent.model_copy(update={"children": children})

    return update_nested_comments(tree, parent_id, _add)


def edit_comment(tree: Tree, target_id: str, text: str) -> Tree:
    """Replace a comment's text."""
    return update_nested_comments(
        tree, target_id, lambda node: node.model_copy(update={"comment": text})
    )


def toggle_comment_like(tree: Tree, target_id: str) -> Tree:
    """Flip the viewer's like on a comment and move its count to match."""

    def _toggle(node: Reply) -> Reply:
        liked = not node.is_liked
        likes = node.likes + 1 if liked else max(node.likes - 1, 0)
        return node.model_copy(update={"is_liked": liked, "likes": likes})

    return update_nested_comments(tree, target_id, _toggle)


def delete_comment_reply(tree: Tree, parent_id: str, target_id: str) -> Tree:
    """Drop a deleted reply from its parent's children."""

    def _remove(parent: Reply) -> Reply:
        children = tuple(c for c in parent.children if c.comment_id != target_id)
        if len(children) == len(parent.children):
            return parent
        return parent.model_copy(
            update={"children": children, "replies": max(parent.replies - 1, 0)}
        )

    return update_nested_comments(tree, parent_id, _remove)


def merge_root_page(tree: Tree, rows: Sequence[Reply]) -> Tree:
    """Merge a fetched page of root comments into the tree."""
    return _merge(tree, rows)


def add_root_comment(tree: Tree, reply: Reply) -> Tree:
    """Put a freshly created root comment at the front of the tree."""
    if any(r.comment_id == reply.comment_id for r in tree):
        return tree
    return (reply, *tree)


def remove_root_comment(tree: Tree, comment_id: str) -> Tree:
    """Drop a deleted root comment."""
    remaining = tuple(r for r in tree if r.comment_id != comment_id)
    return tree if len(remaining) == len(tree) else remaining


def iter_comment_ids(tree: Tree) -> Iterator[str]:
    """Yield the ID of every materialized comment, depth first."""
    for node in tree:
        yield node.comment_id
        yield from iter_comment_ids(node.children)


def find_comment(tree: Tree, comment_id: str) -> Reply | None:
    """Return the materialized node ``comment_id``, if held."""
    for node in tree:
        if node.comment_id == comment_id:
            return node
        found = find_comment(node.children, comment_id)
        if found:
            return found
    return None
