from oodnotes.domain.patterns.adapter import (
    TURKEY_FLIGHTS_PER_DUCK_FLIGHT,
    MallardQuacker,
    Quacker,
    TurkeyAdapter,
    WildTurkey,
    exercise_quacker,
    quack_all,
)
from oodnotes.domain.patterns.facade import (
    Amplifier,
    HomeTheaterFacade,
    Projector,
    StreamingPlayer,
    TheaterLights,
)


def test_turkey_adapter_satisfies_quacker():
    adapter = TurkeyAdapter(WildTurkey())

    assert isinstance(adapter, Quacker)
    assert adapter.quack() == "Gobble gobble"
    assert len(adapter.fly()) == TURKEY_FLIGHTS_PER_DUCK_FLIGHT


def test_client_treats_duck_and_adapter_alike():
    assert quack_all([MallardQuacker(), TurkeyAdapter(WildTurkey())]) == ["Quack", "Gobble gobble"]
    assert exercise_quacker(MallardQuacker()) == ["Quack", "I'm flying"]


def test_facade_drives_subsystems():
    # Arrange
    amplifier, projector, player, lights = Amplifier(), Projector(), StreamingPlayer(), TheaterLights()
    theater = HomeTheaterFacade(amplifier, projector, player, lights)

    # Act
    trace = theater.watch_movie("Casablanca", volume=7)

    # Assert
    assert trace[0] == "Get ready to watch a movie..."
    assert trace[-1] == 'Streaming player playing "Casablanca"'
    assert amplifier.is_on and amplifier.volume == 7
    assert projector.mode == "widescreen"
    assert lights.level == 10


def test_facade_end_movie_resets_subsystems():
    amplifier, projector, player, lights = Amplifier(), Projector(), StreamingPlayer(), TheaterLights()
    theater = HomeTheaterFacade(amplifier, projector, player, lights)
    theater.watch_movie("Casablanca")

    trace = theater.end_movie()

    assert 'Streaming player stopped "Casablanca"' in trace
    assert not amplifier.is_on
    assert not projector.is_on
    assert lights.level == 100
    assert player.movie is None
