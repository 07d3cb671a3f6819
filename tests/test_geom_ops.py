from imagemanip.geom_ops import rotate_180, rotate_ccw, rotate_cw


def test_rotate_cw_swaps_dimensions(noise_image):
    out = rotate_cw(noise_image)
    assert out.size == (noise_image.height, noise_image.width)


def test_rotate_cw_mapping(noise_image):
    out = rotate_cw(noise_image)
    for x in range(out.width):
        for y in range(out.height):
            assert out.get(x, y) == noise_image.get(y, noise_image.height - 1 - x)


def test_rotate_cw_corners(quad):
    # top-left goes to top-right
    out = rotate_cw(quad)
    assert out.get(1, 0) == quad.get(0, 0)
    assert out.get(0, 0) == quad.get(0, 1)


def test_four_rotations_are_identity(noise_image):
    out = noise_image
    for _ in range(4):
        out = rotate_cw(out)
    assert out == noise_image


def test_ccw_undoes_cw(noise_image):
    assert rotate_ccw(rotate_cw(noise_image)) == noise_image


def test_rotate_180_is_two_cw(noise_image):
    assert rotate_180(noise_image) == rotate_cw(rotate_cw(noise_image))


def test_rotation_does_not_alias_input(noise_image):
    before = noise_image.copy()
    out = rotate_cw(noise_image)
    out.set(0, 0, (1, 2, 3))
    assert noise_image == before
