from userposts.aggregate import build_user, group_user_rows


def row(user_id, post_id=None, address_id=None, name="Jame"):
    return {
        "user_id": user_id,
        "name": name,
        "email": f"{name.lower()}@x.com",
        "post_id": post_id,
        "post_title": None if post_id is None else f"title{post_id}",
        "post_body": None if post_id is None else f"body{post_id}",
        "address_id": address_id,
        "address_street": None if address_id is None else f"street{address_id}",
    }


ROWS = [
    row(2, post_id=10, address_id=20, name="Anna"),
    row(1, post_id=11, address_id=21),
    row(2, post_id=12, address_id=20, name="Anna"),
    row(3, name="Dog"),
]


def test_group_keeps_first_seen_order():
    users = group_user_rows(ROWS)

    assert [user["user_id"] for user in users] == [2, 1, 3]
    assert [post["post_id"] for post in users[0]["posts"]] == [10, 12]
    assert users[0]["posts"][0] == {"post_id": 10, "title": "title10", "body": "body10"}


def test_null_children_are_skipped():
    users = group_user_rows(ROWS)

    assert users[2] == {
        "user_id": 3,
        "name": "Dog",
        "email": "dog@x.com",
        "posts": [],
        "addresses": [],
    }


def test_cross_product_is_not_deduplicated():
    users = group_user_rows(ROWS)

    assert users[0]["addresses"] == [
        {"address_id": 20, "street": "street20"},
        {"address_id": 20, "street": "street20"},
    ]


def test_dedupe_keeps_each_child_once():
    users = group_user_rows(ROWS, dedupe=True)

    assert users[0]["addresses"] == [{"address_id": 20, "street": "street20"}]
    assert [post["post_id"] for post in users[0]["posts"]] == [10, 12]


def test_group_is_idempotent():
    first = group_user_rows(ROWS)
    second = group_user_rows(ROWS)

    assert first == second
    assert first[0]["posts"] is not second[0]["posts"]


def test_group_empty_and_malformed_rows():
    assert group_user_rows([]) == []
    assert group_user_rows([{"user_id": 1}]) == [
        {"user_id": 1, "name": None, "email": None, "posts": [], "addresses": []}
    ]


def test_build_user():
    rows = [row(1, 11, 21), row(1, 11, 22), row(1, 12, 21), row(1, 12, 22)]

    user = build_user(rows)

    assert user["user_id"] == 1
    assert [post["post_id"] for post in user["posts"]] == [11, 11, 12, 12]
    assert [a["address_id"] for a in user["addresses"]] == [21, 22, 21, 22]

    deduped = build_user(rows, dedupe=True)
    assert [post["post_id"] for post in deduped["posts"]] == [11, 12]
    assert [a["address_id"] for a in deduped["addresses"]] == [21, 22]


def test_build_user_no_rows():
    assert build_user([]) is None
