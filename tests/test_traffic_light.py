import pytest

from simulab.traffic_light import (
    DEFAULT_GREEN_SECONDS,
    DEFAULT_RED_SECONDS,
    DEFAULT_YELLOW_SECONDS,
    NO_EMERGENCY,
    VEHICLES_PER_CYCLE,
    LightState,
    Mode,
    TrafficLight,
    mode_name,
    next_cyclic_state,
    state_name,
)


class FakeClock:
    def __init__(self, value=100):
        self.value = value

    def __call__(self):
        return self.value


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def light(clock):
    return TrafficLight(clock=clock)


def test_initial_state(light):
    assert light.state is LightState.RED
    assert light.mode is Mode.AUTOMATIC
    assert light.remaining_seconds == DEFAULT_RED_SECONDS
    assert light.emergency_reason == NO_EMERGENCY
    assert light.cycles_completed == 0


@pytest.mark.parametrize(
    "state, expected",
    [
        (LightState.RED, LightState.GREEN),
        (LightState.GREEN, LightState.YELLOW),
        (LightState.YELLOW, LightState.RED),
        (LightState.OFF, LightState.RED),
        (LightState.EMERGENCY, LightState.RED),
    ],
)
def test_next_cyclic_state(state, expected):
    assert next_cyclic_state(state) is expected


def test_names():
    assert state_name(LightState.YELLOW) == "GIALLO"
    assert state_name(LightState.MAINTENANCE) == "MANUTENZIONE"
    assert mode_name(Mode.MANUAL) == "Manuale"


def test_change_state_sets_durations(light):
    assert light.change_state(LightState.GREEN) is LightState.RED
    assert light.remaining_seconds == DEFAULT_GREEN_SECONDS
    light.change_state(LightState.YELLOW)
    assert light.remaining_seconds == DEFAULT_YELLOW_SECONDS
    light.change_state(LightState.OFF)
    assert light.remaining_seconds == 0


def test_yellow_to_red_completes_cycle(light):
    light.change_state(LightState.YELLOW)
    light.change_state(LightState.RED)
    assert light.cycles_completed == 1
    assert light.vehicles_estimate == VEHICLES_PER_CYCLE


def test_green_to_red_does_not_count_cycle(light):
    light.change_state(LightState.GREEN)
    light.change_state(LightState.RED)
    assert light.cycles_completed == 0
    assert light.vehicles_estimate == 0


def test_update_automatic_switches_when_timer_expires(light, clock):
    previous = light.update_automatic(now=clock.value + DEFAULT_RED_SECONDS)
    assert previous is LightState.RED
    assert light.state is LightState.GREEN
    assert light.total_running_seconds == DEFAULT_RED_SECONDS


def test_update_automatic_keeps_state_before_expiry(light, clock):
    assert light.update_automatic(now=clock.value + 1) is None
    assert light.state is LightState.RED
    assert light.remaining_seconds == DEFAULT_RED_SECONDS - 1


def test_update_ignored_in_manual_mode(light, clock):
    light.mode = Mode.MANUAL
    assert light.update_automatic(now=clock.value + 1000) is None
    assert light.state is LightState.RED


def test_emergency_blocks_state_changes(light):
    light.activate_emergency("Incidente", now=100)
    assert light.state is LightState.EMERGENCY
    assert light.mode is Mode.EMERGENCY
    assert light.remaining_seconds == -1
    assert light.emergencies == 1
    with pytest.raises(RuntimeError):
        light.change_state(LightState.GREEN)


def test_deactivate_emergency_returns_duration(light):
    light.activate_emergency("Incidente", now=100)
    assert light.deactivate_emergency(now=142) == 42
    assert light.state is LightState.RED
    assert light.mode is Mode.AUTOMATIC
    assert light.emergency_reason == NO_EMERGENCY
    assert light.cycles_completed == 0


def test_deactivate_without_emergency_raises(light):
    with pytest.raises(RuntimeError):
        light.deactivate_emergency(now=100)


def test_reason_is_truncated(light):
    light.activate_emergency("x" * 150, now=100)
    assert light.emergency_reason == "x" * 99


def test_default_configuration_restored(light):
    light.red_seconds = 60
    light.sounds_enabled = False
    light.load_default_configuration()
    assert light.red_seconds == DEFAULT_RED_SECONDS
    assert light.sounds_enabled is True


def test_render_graphic_marks_active_lamp(light):
    drawing = light.render_graphic()
    assert "🔴" in drawing
    assert "🟢" not in drawing
    light.change_state(LightState.OFF)
    assert "SPENTO" in light.render_graphic()


def test_render_status_shows_emergency(light):
    light.activate_emergency("Blackout", now=100)
    status = light.render_status()
    assert "EMERGENZA ATTIVA: Blackout" in status
    assert "⚠️ EMERGENZA ⚠️" in status


def test_render_statistics_includes_calculations(light):
    light.change_state(LightState.YELLOW)
    light.change_state(LightState.RED)
    report = light.render_statistics(now=100)
    assert "CALCOLI" in report
    assert f"Veicoli passati (stima): {VEHICLES_PER_CYCLE}" in report


def test_reset_clears_counters(light):
    light.activate_emergency("Test", now=100)
    light.reset()
    assert light.emergency_active is False
    assert light.emergencies == 0
    assert light.state is LightState.RED