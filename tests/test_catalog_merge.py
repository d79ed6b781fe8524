from yestv.catalog import (
    MODE_MERGE,
    MODE_REPLACE,
    catalog_key,
    merge_catalog_items,
    parse_mode,
)


def test_catalog_key_prefers_id_then_title():
    assert catalog_key({"id": 7, "title": "X"}) == "id:7"
    assert catalog_key({"id": "", "title": "  The Movie "}) == "title:the movie"
    assert catalog_key({"id": None, "title": "A"}) == "title:a"
    assert catalog_key({"title": "   "}) is None
    assert catalog_key({"name": "no identity"}) is None
    assert catalog_key("not a dict") is None


def test_parse_mode_defaults_to_replace():
    assert parse_mode("merge") == MODE_MERGE
    assert parse_mode("MERGE") == MODE_MERGE
    assert parse_mode("replace") == MODE_REPLACE
    assert parse_mode("upsert") == MODE_REPLACE
    assert parse_mode(None) == MODE_REPLACE
    assert parse_mode(1) == MODE_REPLACE


def test_merge_mode_keeps_position_on_update():
    existing = [{"id": 1, "v": "a"}, {"id": 2, "v": "b"}]
    items, stats = merge_catalog_items(existing, [{"id": 1, "v": "z"}], MODE_MERGE)
    assert items == [{"id": 1, "v": "z"}, {"id": 2, "v": "b"}]
    assert (stats.added, stats.updated) == (0, 1)


def test_merge_mode_appends_new_items():
    existing = [{"id": 1}]
    items, stats = merge_catalog_items(existing, [{"id": 3}, {"title": "New"}], MODE_MERGE)
    assert items == [{"id": 1}, {"id": 3}, {"title": "New"}]
    assert (stats.added, stats.updated) == (2, 0)


def test_merge_is_idempotent_with_empty_batch():
    existing = [{"id": 1, "v": "a"}, {"title": "B"}, {"name": "anon"}]
    first, _ = merge_catalog_items(existing, [{"id": 2}], MODE_MERGE)
    again, stats = merge_catalog_items(first, [], MODE_MERGE)
    assert again == first
    assert (stats.added, stats.updated) == (0, 0)


def test_merge_copies_items():
    existing = [{"id": 1, "v": "a"}]
    items, _ = merge_catalog_items(existing, [], MODE_MERGE)
    items[0]["v"] = "changed"
    assert existing[0]["v"] == "a"


def test_replace_mode_drops_existing_and_counts_updated():
    a, b = {"id": "a"}, {"id": "b"}
    items, stats = merge_catalog_items([a, b], [{"id": "b", "v": 2}], MODE_REPLACE)
    assert items == [{"id": "b", "v": 2}]
    assert (stats.added, stats.updated) == (0, 1)


def test_replace_mode_counts_added_for_unknown_key():
    items, stats = merge_catalog_items([{"id": "a"}, {"id": "b"}], [{"id": "c"}], MODE_REPLACE)
    assert items == [{"id": "c"}]
    assert (stats.added, stats.updated) == (1, 0)


def test_replace_with_empty_batch_empties_catalog():
    items, stats = merge_catalog_items([{"id": 1}], [], MODE_REPLACE)
    assert items == []
    assert (stats.added, stats.updated) == (0, 0)


def test_duplicate_ids_collapse_to_last_value_and_count_once():
    incoming = [{"id": 5, "v": 1}, {"id": 5, "v": 2, "extra": True}]
    items, stats = merge_catalog_items([], incoming, MODE_MERGE)
    assert items == [{"id": 5, "v": 2, "extra": True}]
    assert (stats.added, stats.updated) == (1, 0)


def test_titles_match_case_and_whitespace_insensitively():
    existing = [{"title": "Breaking News", "v": 1}]
    items, stats = merge_catalog_items(existing, [{"title": "  breaking NEWS ", "v": 2}], MODE_MERGE)
    assert items == [{"title": "  breaking NEWS ", "v": 2}]
    assert (stats.added, stats.updated) == (0, 1)


def test_duplicates_among_existing_keep_first_position():
    existing = [{"id": 1, "v": "a"}, {"id": 2}, {"id": 1, "v": "b"}]
    items, _ = merge_catalog_items(existing, [], MODE_MERGE)
    assert items == [{"id": 1, "v": "b"}, {"id": 2}]


def test_non_dict_items_are_skipped():
    existing = [None, 3, {"id": 1}]
    incoming = [None, "x", 42, ["list"], {"id": 2}]
    items, stats = merge_catalog_items(existing, incoming, MODE_MERGE)
    assert items == [{"id": 1}, {"id": 2}]
    assert (stats.added, stats.updated) == (1, 0)


def test_anonymous_items_never_collide():
    existing = [{"name": "old"}]
    incoming = [{"name": "new"}, {"name": "new"}]
    items, stats = merge_catalog_items(existing, incoming, MODE_MERGE)
    assert items == [{"name": "old"}, {"name": "new"}, {"name": "new"}]
    assert (stats.added, stats.updated) == (2, 0)


def test_anonymous_items_in_replace_mode_are_added():
    items, stats = merge_catalog_items([{"name": "old"}], [{"name": "new"}], MODE_REPLACE)
    assert items == [{"name": "new"}]
    assert (stats.added, stats.updated) == (1, 0)


def test_id_and_title_keys_do_not_collide():
    items, stats = merge_catalog_items([{"id": "x"}], [{"title": "x"}], MODE_MERGE)
    assert items == [{"id": "x"}, {"title": "x"}]
    assert (stats.added, stats.updated) == (1, 0)


def test_integral_float_and_int_ids_share_a_slot():
    assert catalog_key({"id": 1.0}) == catalog_key({"id": 1}) == "id:1"
    assert catalog_key({"id": 1.5}) == "id:1.5"
    assert catalog_key({"id": True}) == "id:true"
    assert catalog_key({"id": "1"}) == "id:1"
    items, stats = merge_catalog_items([{"id": 1, "v": "a"}], [{"id": 1.0, "v": "b"}], MODE_MERGE)
    assert items == [{"id": 1.0, "v": "b"}]
    assert (stats.added, stats.updated) == (0, 1)
