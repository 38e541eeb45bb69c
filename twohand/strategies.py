from hypothesis.strategies import (integers, booleans, floats as _floats,
    composite, lists, sampled_from, one_of)

from twohand import (Beatmap, Circle, Slider, Spinner, Position, StarRating,
    CursorData, CursorOccurrence, MovementType, HitResult, ReplayData,
    ReplayObjectData, Mod)


def floats(*args, **kwargs):
    # I don't really want to deal with these edge cases right now.
    return _floats(*args, allow_nan=False, allow_infinity=False, **kwargs)


def times():
    return integers(0, 20000).map(float)


@composite
def positions(draw, *, reasonable=True):
    if reasonable:
        return Position(
            x=draw(integers(0, Position.x_max)),
            y=draw(integers(0, Position.y_max)),
        )
    return Position(x=draw(floats()), y=draw(floats()))


@composite
def circles(draw):
    return Circle(
        position=draw(positions()),
        time=draw(times()),
        stack_height=draw(integers(-2, 2)),
    )


@composite
def sliders(draw):
    time = draw(times())
    return Slider(
        position=draw(positions()),
        time=time,
        end_time=time + draw(integers(20, 1000)),
        tail=draw(positions()),
        repeat=draw(integers(1, 3)),
        stack_height=draw(integers(-2, 2)),
    )


@composite
def spinners(draw):
    time = draw(times())
    return Spinner(time=time, end_time=time + draw(integers(100, 3000)))


def hit_objects():
    return one_of(circles(), circles(), sliders(), spinners())


@composite
def beatmaps(draw, *, min_size=1, max_size=30):
    hit_objs = draw(lists(hit_objects(), min_size=min_size, max_size=max_size))
    hit_objs = sorted(hit_objs, key=lambda hitobj: hitobj.time)
    return Beatmap(
        circle_size=draw(floats(1, 10)),
        overall_difficulty=draw(floats(1, 10)),
        hit_objects=hit_objs,
    )


@composite
def cursor_streams(draw, *, max_size=40):
    samples = draw(lists(
        sampled_from(list(MovementType)).flatmap(
            lambda id: times().map(lambda time: (time, id)),
        ),
        max_size=max_size,
    ))
    return CursorData(
        CursorOccurrence(time, draw(positions()), id)
        for time, id in sorted(samples, key=lambda sample: sample[0])
    )


@composite
def replay_object_data(draw):
    return ReplayObjectData(
        accuracy=float(draw(integers(-100, 100))),
        result=draw(sampled_from(list(HitResult))),
    )


@composite
def plays(draw, *, min_cursors=0, max_cursors=4):
    """A star rating and a replay of it.
    """
    beatmap = draw(beatmaps())
    mods = Mod(0)
    if draw(booleans()):
        mods |= Mod.precise
    if draw(booleans()):
        mods |= Mod.hard_rock

    star_rating = StarRating(beatmap, mods)
    replay_data = ReplayData(
        draw(lists(
            cursor_streams(),
            min_size=min_cursors,
            max_size=max_cursors,
        )),
        draw(lists(
            replay_object_data(),
            min_size=len(star_rating.objects),
            max_size=len(star_rating.objects),
        )),
        mods,
    )
    return star_rating, replay_data
