from invaders.collider import Body, Collider
from invaders.geometry import Rect, Sprite, Vector2


def make_ground():
    return Body(Vector2(0, 100), Vector2(200, 50))


def make_player(x, y, w=20, h=50):
    body = Body(Vector2(x, y), Vector2(w, h))
    sprite = Sprite(position=Vector2(x, y), texture_rect=Rect(0, 0, w, h))
    return body, sprite


def test_body_bounds_follow_moves():
    body = Body(Vector2(1, 2), Vector2(3, 4))
    body.move(10, 20)
    assert body.bounds() == Rect(11, 22, 3, 4)


def test_no_collision_returns_none_and_moves_nothing():
    ground = make_ground()
    player, sprite = make_player(50, 0)
    result = Collider(ground).check_collision(Collider(player), sprite, 1.0)
    assert result is None
    assert player.position == Vector2(50, 0)


def test_landing_on_ground_pushes_player_out():
    ground = make_ground()
    player, sprite = make_player(50, 60)
    direction = Collider(ground).check_collision(Collider(player), sprite, 1.0)
    assert direction == Vector2(0.0, -1.0)
    assert not player.bounds().intersects(ground.bounds())
    assert sprite.position.y == player.position.y
    assert ground.position == Vector2(0, 100)


def test_push_is_clamped():
    ground_a, ground_b = make_ground(), make_ground()
    pa, sa = make_player(50, 60)
    pb, sb = make_player(50, 60)
    Collider(ground_a).check_collision(Collider(pa), sa, 1.0)
    Collider(ground_b).check_collision(Collider(pb), sb, 5.0)
    assert pa.position == pb.position
    assert ground_b.position == ground_a.position


def test_zero_push_moves_only_self():
    ground = make_ground()
    player, sprite = make_player(50, 60)
    Collider(ground).check_collision(Collider(player), sprite, 0.0)
    assert player.position == Vector2(50, 60)
    assert not ground.bounds().intersects(player.bounds())


def test_air_collision_ignored_when_flag_set():
    ground = make_ground()
    player, sprite = make_player(50, 60)
    direction, ignore = Collider(ground).check_air_collision(Collider(player), sprite, 1.0, True)
    assert direction is None
    assert ignore is True
    assert player.position == Vector2(50, 60)


def test_air_collision_from_below_sets_ignore():
    ground = make_ground()
    player, sprite = make_player(50, 140)
    direction, ignore = Collider(ground).check_air_collision(Collider(player), sprite, 1.0, False)
    assert direction == Vector2(0.0, 1.0)
    assert ignore is True
    assert sprite.position == Vector2(50, 140)


def test_air_collision_from_above_keeps_flag():
    ground = make_ground()
    player, sprite = make_player(50, 60)
    direction, ignore = Collider(ground).check_air_collision(Collider(player), sprite, 1.0, False)
    assert direction == Vector2(0.0, -1.0)
    assert ignore is False
    assert not player.bounds().intersects(ground.bounds())


def test_stair_left_side_contact_lifts_player():
    step = Body(Vector2(100, 0), Vector2(50, 100))
    player, sprite = make_player(80, 40, 30, 20)
    direction = Collider(step).check_stair_collision(Collider(player), sprite, 1.0, "stairL")
    assert direction == Vector2(-1.0, 0.0)
    assert player.position.x == 80
    assert player.position.y < 40
    assert sprite.position == player.position


def test_plain_stair_side_contact_pushes_player_back():
    step = Body(Vector2(100, 0), Vector2(50, 100))
    player, sprite = make_player(80, 40, 30, 20)
    direction = Collider(step).check_stair_collision(Collider(player), sprite, 1.0, "wall")
    assert direction == Vector2(-1.0, 0.0)
    assert player.position.y == 40
    assert not player.bounds().intersects(step.bounds())