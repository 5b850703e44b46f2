from pfq.suggest.grouping import group_results, normalize_description
from pfq.suggest.models import total_listings
from tests.mocks.fixtures import make_record


def test_normalize_description():
    assert normalize_description('  Black CAT ') == 'black cat'
    assert normalize_description('STRASSE') == normalize_description('straße')
    assert normalize_description(None) == ''
    assert normalize_description('   ') == ''


def test_groups_by_normalized_description(sample_records):
    groups = group_results(sample_records)
    first = groups[0]
    assert first.normalized_key == 'black cat'
    # Display text and example id come from the first record of the group
    assert first.display_description == 'Black cat'
    assert first.example_id == 1
    assert [m.id for m in first.members] == [1, 3]
    assert first.count == 2


def test_truncates_to_five_groups(sample_records):
    groups = group_results(sample_records)
    assert len(groups) == 5
    assert [g.display_description for g in groups] == [
        'Black cat', 'Ginger dog', 'White rabbit', 'Grey parrot', 'Brown hamster',
    ]


def test_max_groups_parameter(sample_records):
    assert len(group_results(sample_records, max_groups=2)) == 2
    assert group_results(sample_records, max_groups=0) == []


def test_ranking_is_count_desc_then_first_seen():
    records = [
        make_record(1, 'a-one'),
        make_record(2, 'b-two'),
        make_record(3, 'c-three'),
        make_record(4, 'c-three'),
        make_record(5, 'b-two'),
        make_record(6, 'c-three'),
    ]
    groups = group_results(records)
    assert [(g.normalized_key, g.count) for g in groups] == [('c-three', 3), ('b-two', 2), ('a-one', 1)]
    for g1, g2 in zip(groups, groups[1:]):
        assert g1.count >= g2.count


def test_ties_keep_first_seen_order():
    records = [make_record(i, d) for i, d in enumerate(['zeta', 'alpha', 'mid', 'alpha', 'zeta', 'mid'])]
    assert [g.normalized_key for g in group_results(records)] == ['zeta', 'alpha', 'mid']


def test_skips_missing_and_blank_descriptions():
    records = [
        make_record(1, None),
        make_record(2, ''),
        make_record(3, '   '),
        make_record(4, 'Lost hedgehog'),
    ]
    groups = group_results(records)
    assert len(groups) == 1
    assert groups[0].example_id == 4


def test_invariants_hold(sample_records):
    groups = group_results(sample_records + sample_records[:3])
    keys = [g.normalized_key for g in groups]
    assert len(keys) == len(set(keys))
    for g in groups:
        assert g.count == len(g.members)


def test_deterministic(sample_records):
    first = group_results(sample_records)
    second = group_results(list(sample_records))
    assert [(g.normalized_key, [m.id for m in g.members]) for g in first] == \
        [(g.normalized_key, [m.id for m in g.members]) for g in second]


def test_empty_input():
    assert group_results([]) == []


def test_examples_and_hidden_count():
    records = [make_record(i, 'Same dog', 'dog') for i in range(5)]
    group = group_results(records)[0]
    assert [m.id for m in group.examples(2)] == [0, 1]
    assert group.hidden_count(2) == 3
    assert group.hidden_count(10) == 0
    assert total_listings([group]) == 5
