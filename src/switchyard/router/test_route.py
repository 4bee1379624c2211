import pytest

from .route import parse, normalize, split_path, build_path, Route, \
    MatchResult, PatternError, SegmentType


@pytest.mark.parametrize('pattern,result', [
    ('/', ()),
    ('', ()),
    ('articles', (('literal', 'articles'),)),
    ('/articles/', (('literal', 'articles'),)),
    ('//articles//', (('literal', 'articles'),)),
    ('/articles/:id', (('literal', 'articles'), ('param', 'id'))),
    ('/:a/:b', (('param', 'a'), ('param', 'b'))),
    ('/download/:*', (('literal', 'download'), ('splat', '*'))),
    ('/:*', (('splat', '*'),)),
    ('/Articles/a:b', (('literal', 'Articles'), ('literal', 'a:b'))),
    ('/a//b', (('literal', 'a'), ('literal', 'b')))
])
def test_parse(pattern, result):
    assert parse(pattern) == result


@pytest.mark.parametrize('pattern,error', [
    ('/:*/a', 'Splat'),
    ('/:*/:*', 'Splat'),
    ('/:a/:a', 'Duplicate'),
    ('/:id/x/:id/:*', 'Duplicate'),
    ('/a/:/b', 'Empty')
])
def test_parse_error(pattern, error):
    with pytest.raises(PatternError) as info:
        parse(pattern)
    assert error in info.value.args[0]
    assert pattern in info.value.args[0]


def test_pattern_error_is_value_error():
    with pytest.raises(ValueError):
        parse('/:x/:x')


def test_segment_types():
    kinds = [SegmentType(typ) for typ, _ in parse('/a/:b/:*')]
    assert kinds == [SegmentType.LITERAL, SegmentType.PARAM, SegmentType.SPLAT]


@pytest.mark.parametrize('pattern,result', [
    ('', '/'),
    ('/', '/'),
    ('articles', '/articles'),
    ('//articles//', '/articles'),
    ('a//b/:c/', '/a/b/:c')
])
def test_normalize(pattern, result):
    assert normalize(pattern) == result


def test_split_path():
    assert split_path('//foo/bar.png//') == ['foo', 'bar.png']
    assert split_path('/') == []


def handler():
    pass


@pytest.mark.parametrize('route', [
    Route('/', handler),
    Route('/articles/:id', 'show'),
    Route('/download/:*', 'download'),
    Route('//a/:b/:c//', handler)
], ids=Route.describe)
def test_route(route):
    assert route.path == normalize(route.pattern)
    assert route.segments == parse(route.pattern)
    assert all(isinstance(typ, SegmentType) for typ, _ in route.segments)
    assert route.has_splat == route.pattern.rstrip('/').endswith(':*')


def test_route_equality():
    assert Route('/a/:b', 'x') == Route('a/:b/', 'x')
    assert Route('/a/:b', 'x') != Route('/a/:b', 'y')
    assert Route('/a', 'x') != Route('/b', 'x')


def test_route_rejects_bad_pattern():
    with pytest.raises(PatternError):
        Route('/:*/tail', 'x')


@pytest.mark.parametrize('pattern,params,result', [
    ('/articles', {}, ('/articles', set())),
    ('/articles/:id', {'id': 5}, ('/articles/5', {'id'})),
    ('/download/:*', {'*': 'a/b.png'}, ('/download/a/b.png', {'*'})),
    ('/articles/:id', {'id': 'x?y #%'},
        ('/articles/x%3Fy%20%23%25', {'id'})),
    ('/tags/:name', {'name': 'a/b'}, ('/tags/a%2Fb', {'name'})),
    ('/download/:*', {'*': 'a b/c#.png'},
        ('/download/a%20b/c%23.png', {'*'})),
    ('/articles/:id/:format', {'id': 1}, None)
])
def test_build_path(pattern, params, result):
    assert build_path(Route(pattern, 'x'), params) == result


def test_match_result():
    result = MatchResult('show', {'id': '1'})
    assert result.target == 'show'
    assert dict(result.params) == {'id': '1'}
    assert result.not_found is False

    with pytest.raises(TypeError):
        result.params['id'] = '2'

    with pytest.raises(AttributeError):
        result.target = 'other'


def test_match_result_defaults():
    result = MatchResult('404', not_found=True)
    assert len(result.params) == 0
    assert result.not_found is True
