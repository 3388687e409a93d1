import pytest

from hpclab.colormap import Colormap, rgb, rgbf, table


@pytest.mark.parametrize("cm", list(Colormap))
def test_tables_have_256_entries(cm):
    assert len(table(cm)) == 256
    assert all(len(entry) == 3 for entry in table(cm))


def test_enum_order_matches_tables():
    assert [c.value for c in Colormap] == [0, 1, 2, 3]
    assert table(0) is table(Colormap.MAGMA)
    assert table(3) is table(Colormap.VIRIDIS)


@pytest.mark.parametrize("cm", list(Colormap))
def test_endpoints_match_table(cm):
    assert rgbf(cm, 0.0, 0.0, 1.0) == pytest.approx(table(cm)[0])
    assert rgbf(cm, 1.0, 0.0, 1.0) == pytest.approx(table(cm)[255])


def test_values_are_clamped():
    assert rgbf(Colormap.PLASMA, -10.0, 0.0, 1.0) == pytest.approx(table(Colormap.PLASMA)[0])
    assert rgbf(Colormap.PLASMA, 10.0, 0.0, 1.0) == pytest.approx(table(Colormap.PLASMA)[255])


def test_exact_index_hits_entry():
    for k in (0, 17, 128, 254):
        assert rgbf(Colormap.INFERNO, float(k), 0.0, 255.0) == pytest.approx(
            table(Colormap.INFERNO)[k]
        )


def test_halfway_interpolates():
    a = table(Colormap.MAGMA)[10]
    b = table(Colormap.MAGMA)[11]
    got = rgbf(Colormap.MAGMA, 10.5, 0.0, 255.0)
    for g, x, y in zip(got, a, b):
        assert min(x, y) <= g <= max(x, y)
        assert g == pytest.approx((x + y) / 2)


def test_rgb_viridis_top_is_known_colour():
    assert rgb(Colormap.VIRIDIS, 1.0, 0.0, 1.0) == (253, 231, 37)


def test_rgb_in_byte_range_and_consistent():
    for v in (0.0, 0.3, 0.77, 1.0):
        out = rgb(Colormap.PLASMA, v, 0.0, 1.0)
        assert all(0 <= c <= 255 for c in out)
        fl = rgbf(Colormap.PLASMA, v, 0.0, 1.0)
        assert all(abs(c - f * 255) <= 0.5 for c, f in zip(out, fl))


def test_nan_maps_to_top():
    assert rgbf(Colormap.VIRIDIS, float("nan"), 0.0, 1.0) == pytest.approx(
        table(Colormap.VIRIDIS)[255]
    )


def test_empty_range_raises():
    with pytest.raises(ValueError):
        rgbf(Colormap.MAGMA, 1.0, 2.0, 2.0)


def test_unknown_colormap_raises():
    with pytest.raises(ValueError):
        table(7)