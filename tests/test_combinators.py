import pytest

from enumerationkit import (
    Container,
    Enumeration,
    EnumerationConfig,
    Instance,
    Selector,
    get_container_for_instance,
    merge,
    normalize,
    selector_equals,
)


def _single(name: str, container: str) -> Enumeration:
    return Enumeration(instances=[Instance(name, container_idx=0)], containers=[Container(container)])


def test_selector_equals_treats_falsy_selectors_as_missing():
    assert selector_equals(None, False)
    assert selector_equals(False, False)
    assert not selector_equals(None, Selector(id="a"))
    assert not selector_equals(Selector(id="a"), False)


def test_selector_equals_compares_only_id_and_metadata():
    assert selector_equals(Selector(id="a", metadata="m"), Selector(id="a", metadata="m"))
    assert not selector_equals(Selector(id="a", metadata="m"), Selector(id="b", metadata="m"))
    assert not selector_equals(Selector(id="a", metadata="m"), Selector(id="a", metadata="n"))
    assert selector_equals(
        Selector(id="a", metadata="m", data=("x",)),
        Selector(id="a", metadata="m", data=("y",)),
    )


def test_normalize_wraps_list_form():
    i1, i2 = Instance("a"), Instance("b")

    from_list = normalize([i1, i2])

    assert from_list == normalize(Enumeration(instances=[i1, i2]))
    assert from_list.containers is None


def test_normalize_returns_canonical_form_unchanged():
    enumeration = Enumeration(instances=[])

    assert normalize(enumeration) is enumeration
    assert normalize(None) is None


def test_normalize_rejects_other_shapes():
    with pytest.raises(TypeError, match=r"type=dict"):
        normalize({"instances": []})  # type: ignore[arg-type]


def test_merge_identity_with_nothing():
    r = _single("a", "C")

    assert merge(None, r) is r
    assert merge(r, None) is r
    assert merge(None, None) is None


def test_merge_identity_normalizes_list_form():
    i1 = Instance("a")

    merged = merge([i1], None)

    assert isinstance(merged, Enumeration)
    assert merged.instances == [i1]


def test_merge_rebases_container_indices():
    x = _single("a", "C1")
    y = _single("b", "C2")
    y_instance = y.instances[0]

    merged = merge(x, y)

    assert merged is x
    assert [c.display_name for c in merged.containers] == ["C1", "C2"]
    assert [inst.object_name for inst in merged.instances] == ["a", "b"]
    assert merged.instances[1] is y_instance
    assert y_instance.container_idx == 1


def test_merge_leaves_top_level_instances_unstamped():
    x = _single("a", "C1")
    top = Instance("top")

    merge(x, Enumeration(instances=[top]))

    assert top.container_idx is None
    assert len(x.containers) == 1


def test_merge_adopts_y_containers_when_x_has_none():
    x = Enumeration(instances=[Instance("a")])
    y = _single("b", "C")

    merge(x, y)

    assert x.containers is y.containers
    assert x.instances[1].container_idx == 0


def test_merge_does_not_deduplicate_containers():
    shared = Container("shared")
    x = Enumeration(instances=[Instance("a", container_idx=0)], containers=[shared])
    y = Enumeration(instances=[Instance("a", container_idx=0)], containers=[shared])

    merge(x, y)

    assert x.containers == [shared, shared]
    assert len(x.instances) == 2


def test_merge_with_copy_leaves_inputs_untouched():
    x = _single("a", "C1")
    y = _single("b", "C2")
    y.instances[0].properties = {"p": 1}

    merged = merge(x, y, copy=True)

    assert merged is not x
    assert len(x.instances) == 1
    assert len(x.containers) == 1
    assert y.instances[0].container_idx == 0
    assert merged.instances[1].container_idx == 1
    assert merged.instances[1] is not y.instances[0]
    assert merged.instances[1].properties == {"p": 1}
    merged.instances[1].properties["p"] = 2
    assert y.instances[0].properties == {"p": 1}


def test_merge_with_copy_and_nothing_returns_a_copy():
    r = _single("a", "C")

    for merged in (merge(r, None, copy=True), merge(None, r, copy=True)):
        assert merged == r
        assert merged is not r
        assert merged.instances[0] is not r.instances[0]
        merged.instances.append(Instance("b"))
        assert len(r.instances) == 1

    assert merge(None, None, copy=True) is None


def test_merge_copy_defaults_from_config():
    x = _single("a", "C1")
    y = _single("b", "C2")

    merged = merge(x, y, config=EnumerationConfig(copy_on_merge=True))

    assert merged is not x
    assert len(x.instances) == 1

    in_place = merge(x, y, copy=False, config=EnumerationConfig(copy_on_merge=True))
    assert in_place is x


def test_get_container_for_instance_looks_up_by_index():
    c1, c2 = Container("C1"), Container("C2")
    inst = Instance("a", container_idx=1)
    enumeration = Enumeration(instances=[inst], containers=[c1, c2])

    assert get_container_for_instance(enumeration, inst) is c2


def test_get_container_for_instance_does_not_guard_bad_indices():
    enumeration = _single("a", "C")

    with pytest.raises(IndexError):
        get_container_for_instance(enumeration, Instance("b", container_idx=5))
