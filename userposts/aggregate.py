"""
Folding of flat users/posts/addresses join rows into nested user objects.

Each input row is one (user, post, address) combination produced by
``users LEFT JOIN posts LEFT JOIN addresses``. Post and address columns are
NULL when the user has none of them.

Without ``dedupe`` every joined row contributes its post and its address, so
a user with two posts and two addresses comes back with four post entries and
four address entries. With ``dedupe=True`` children are kept once per id, in
first-seen order.
"""

from typing import Any, Dict, Iterable, List, Mapping, Optional


def _new_user(row: Mapping[str, Any]) -> Dict[str, Any]:
    return {
        "user_id": row.get("user_id"),
        "name": row.get("name"),
        "email": row.get("email"),
        "posts": [],
        "addresses": [],
    }


def _add_children(
    user: Dict[str, Any], row: Mapping[str, Any], seen: Optional[Dict[str, set]]
) -> None:
    post_id = row.get("post_id")
    if post_id is not None and (seen is None or post_id not in seen["posts"]):
        user["posts"].append(
            {
                "post_id": post_id,
                "title": row.get("post_title"),
                "body": row.get("post_body"),
            }
        )
        if seen is not None:
            seen["posts"].add(post_id)

    address_id = row.get("address_id")
    if address_id is not None and (
        seen is None or address_id not in seen["addresses"]
    ):
        user["addresses"].append(
            {"address_id": address_id, "street": row.get("address_street")}
        )
        if seen is not None:
            seen["addresses"].add(address_id)


def group_user_rows(
    rows: Iterable[Mapping[str, Any]], dedupe: bool = False
) -> List[Dict[str, Any]]:
    """
    Group joined rows by ``user_id``.

    Users come out in the order their id is first seen in ``rows``.
    """
    users: Dict[Any, Dict[str, Any]] = {}
    seen: Dict[Any, Dict[str, set]] = {}

    for row in rows:
        user_id = row.get("user_id")
        user = users.get(user_id)
        if user is None:
            user = users[user_id] = _new_user(row)
            if dedupe:
                seen[user_id] = {"posts": set(), "addresses": set()}

        _add_children(user, row, seen.get(user_id))

    return list(users.values())


def build_user(
    rows: Iterable[Mapping[str, Any]], dedupe: bool = False
) -> Optional[Dict[str, Any]]:
    """
    Fold the joined rows of a single user into one user object.

    User fields come from the first row. Returns None when there are no rows.
    """
    user = None
    seen = {"posts": set(), "addresses": set()} if dedupe else None

    for row in rows:
        if user is None:
            user = _new_user(row)
        _add_children(user, row, seen)

    return user
