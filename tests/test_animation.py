import asyncio
import numpy as np
import pytest
from capacitor_sim.animation import AnimationDriver
from capacitor_sim.state import SimulationState


def test_phase_cycling_matches_closed_form():
    """After N ticks with step 0.01: phase == (p + 0.01 N) mod 1."""
    p0 = np.array([0.0, 0.123, 0.5, 0.777, 0.9])
    state = SimulationState(carrier_phases=p0)
    driver = AnimationDriver(state, period=0.05, step=0.01)

    n = 37
    for _ in range(n):
        driver.tick()

    expected = np.mod(p0 + 0.01 * n, 1.0)
    np.testing.assert_allclose(state.carrier_phases, expected, atol=1e-9)
    assert driver.ticks == n


def test_phases_never_leave_unit_interval():
    state = SimulationState(carrier_phases=np.linspace(0.0, 0.99, 10))
    driver = AnimationDriver(state, step=0.01)
    for _ in range(1000):
        driver.tick()
        assert np.all(state.carrier_phases >= 0.0)
        assert np.all(state.carrier_phases < 1.0)


def test_tick_only_touches_carriers():
    state = SimulationState(voltage=3.0, distance=4.0, max_distance=8.0, side_length=2.0)
    driver = AnimationDriver(state)
    driver.tick()
    assert (state.voltage, state.distance, state.max_distance, state.side_length) == (3.0, 4.0, 8.0, 2.0)
    assert state.show_field_lines is True


def test_callbacks_run_after_each_tick():
    state = SimulationState()
    driver = AnimationDriver(state)
    seen = []
    cb = lambda s: seen.append(float(s.carrier_phases[0]))
    driver.add_callback(cb)
    driver.tick()
    driver.tick()
    driver.remove_callback(cb)
    driver.tick()
    assert seen == pytest.approx([0.01, 0.02])


def test_invalid_period():
    with pytest.raises(ValueError):
        AnimationDriver(SimulationState(), period=0)


def test_start_stop_lifecycle():
    """Idle -> Running -> Idle, with ticks delivered while running."""
    state = SimulationState()
    driver = AnimationDriver(state, period=0.001)

    async def session():
        assert not driver.running
        driver.start()
        driver.start()  # already running: no second task
        assert driver.running
        await asyncio.sleep(0.05)
        await driver.stop()
        assert not driver.running
        ticks = driver.ticks
        await asyncio.sleep(0.01)
        return ticks

    ticks = asyncio.run(session())
    assert ticks > 0
    assert driver.ticks == ticks  # no ticks after stop
    np.testing.assert_allclose(state.carrier_phases[0], np.mod(0.01 * ticks, 1.0), atol=1e-9)


def test_stop_when_idle_is_noop():
    driver = AnimationDriver(SimulationState())
    asyncio.run(driver.stop())
    assert not driver.running
    assert driver.ticks == 0


def test_start_requires_event_loop():
    driver = AnimationDriver(SimulationState())
    with pytest.raises(RuntimeError):
        driver.start()


def test_failing_callback_does_not_stop_animation(caplog):
    """A redraw that raises is logged; carriers keep moving and stop() returns normally."""
    state = SimulationState()
    driver = AnimationDriver(state, period=0.001)
    seen = []

    def redraw(s):
        if driver.ticks == 3:
            raise RuntimeError("redraw failed")

    driver.add_callback(redraw)
    driver.add_callback(lambda s: seen.append(driver.ticks))

    async def session():
        driver.start()
        await asyncio.sleep(0.05)
        running_mid = driver.running
        await driver.stop()
        return running_mid

    with caplog.at_level("ERROR", logger="capacitor_sim"):
        running_mid = asyncio.run(session())

    assert running_mid
    assert not driver.running
    assert driver.ticks > 3
    assert 3 in seen  # later callbacks still ran on the failing tick
    assert "Tick callback" in caplog.text
