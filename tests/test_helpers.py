import pytest

from questkit.helpers import (
    PATH_FX,
    PATH_THUMBNAIL,
    GameDataError,
    Vector,
    asset_path,
    json_to_vector,
)


def test_json_to_vector_converts_components():
    assert json_to_vector([1, 2.5, -3]) == Vector(1.0, 2.5, -3.0)


def test_json_to_vector_returns_floats():
    vec = json_to_vector([4, 5, 6])
    assert list(vec) == [4.0, 5.0, 6.0]
    assert [repr(component) for component in vec] == ["4.0", "5.0", "6.0"]


@pytest.mark.parametrize("values", [[], [1, 2], [1, 2, 3, 4]])
def test_json_to_vector_requires_three_components(values):
    with pytest.raises(GameDataError):
        json_to_vector(values)


@pytest.mark.parametrize("values", [[1, "a", 3], [1, None, 3], [True, 2, 3]])
def test_json_to_vector_rejects_non_numbers(values):
    with pytest.raises(GameDataError):
        json_to_vector(values)


def test_vector_indexing_and_iteration():
    vec = Vector(7.0, 8.0, 9.0)
    assert list(vec) == [7.0, 8.0, 9.0]
    assert vec[0] == 7.0
    assert vec[2] == 9.0


def test_vector_index_out_of_range():
    with pytest.raises(IndexError):
        Vector()[3]


def test_asset_path_joins_base_and_name():
    assert asset_path(PATH_FX, "PortalFX.PortalFX") == "/Game/FX/PortalFX.PortalFX"


def test_asset_path_keeps_base_prefix():
    path = asset_path(PATH_THUMBNAIL, "Gun")
    assert path.startswith("/Game/Texture/WidgetImage/Thumbnail/")
    assert path.endswith("Gun")