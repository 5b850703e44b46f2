from pfq.api.links import WebLinks


def test_detail_url():
    assert WebLinks('https://pets.test/').detail_url(42) == 'https://pets.test/#/pet/42'


def test_filtered_list_url_is_encoded():
    url = WebLinks('https://pets.test').filtered_list_url('Black cat & <dog>')
    assert url == 'https://pets.test/#/search?description=Black%20cat%20%26%20%3Cdog%3E'
