import io

import pytest

from simulab.traffic_console import TrafficConsole
from simulab.traffic_light import LightState, Mode, TrafficLight


class FakeClock:
    def __init__(self):
        self.now = 0.0

    def __call__(self):
        return self.now


def make_console(text, clock=None, step=0, auto_ticks=None):
    clock = clock if clock is not None else FakeClock()
    light = TrafficLight(clock=clock)
    out = io.StringIO()

    def sleep(seconds):
        clock.now += step

    console = TrafficConsole(
        light,
        stdin=io.StringIO(text),
        stdout=out,
        sleep=sleep,
        clear=lambda: None,
        auto_ticks=auto_ticks,
    )
    return console, out


def test_read_int_retries_until_valid():
    console, out = make_console("abc\n7\n3\n")
    assert console.read_int("Valore", 0, 5) == 3
    assert out.getvalue().count("❌ Errore: inserire un numero tra 0 e 5.") == 2


def test_read_int_accepts_leading_number():
    console, _ = make_console("  4xyz\n")
    assert console.read_int("Valore", 0, 9) == 4


def test_read_int_raises_on_end_of_input():
    console, _ = make_console("")
    with pytest.raises(EOFError):
        console.read_int("Valore", 0, 5)


def test_read_text_strips_newline():
    console, _ = make_console("Incidente\n")
    assert console.read_text("Motivo") == "Incidente"


def test_manual_control_changes_state():
    console, out = make_console("3\n\n0\n")
    console.manual_control()
    assert console.light.state is LightState.GREEN
    assert "🔄 Cambio stato: ROSSO → VERDE" in out.getvalue()


def test_manual_control_blocked_during_emergency():
    console, out = make_console("1\n\n0\n")
    console.light.activate_emergency("test")
    console.manual_control()
    assert console.light.state is LightState.EMERGENCY
    assert "Impossibile cambiare stato durante emergenza!" in out.getvalue()


def test_configuration_sets_red_duration():
    console, _ = make_console("1\n60\n\n")
    console.configuration_panel()
    assert console.light.red_seconds == 60


def test_configuration_toggles_sounds():
    console, out = make_console("4\n\n")
    console.configuration_panel()
    assert console.light.sounds_enabled is False
    assert "Suoni disattivati" in out.getvalue()


def test_configuration_reset_restores_defaults():
    console, _ = make_console("6\n\n")
    console.light.green_seconds = 50
    console.configuration_panel()
    assert console.light.green_seconds == 25


def test_automatic_simulation_advances_state():
    console, out = make_console("\n", step=31)
    console.automatic_simulation(max_ticks=2)
    assert console.light.state is LightState.GREEN
    assert "Modalità automatica terminata." in out.getvalue()


def test_automatic_simulation_skipped_during_emergency():
    console, out = make_console("\n", step=31)
    console.light.activate_emergency("test")
    console.automatic_simulation(max_ticks=3)
    assert console.light.state is LightState.EMERGENCY
    assert "STATO SEMAFORO" not in out.getvalue()


def test_cyclic_test_runs_updates():
    console, _ = make_console("\n", step=31)
    console.cyclic_test()
    assert console.light.state is not LightState.RED
    assert console.light.total_running_seconds == 62


def test_run_exit_prints_final_statistics():
    console, out = make_console("\n0\n")
    assert console.run() == 0
    assert "STATISTICHE FINALI" in out.getvalue()


def test_run_emergency_cycle():
    console, out = make_console("\n3\nFire\n4\n0\n")
    assert console.run() == 0
    light = console.light
    assert light.emergencies == 1
    assert light.emergency_active is False
    assert light.state is LightState.RED
    assert "Motivo: Fire" in out.getvalue()


def test_run_deactivate_without_emergency_warns():
    console, out = make_console("\n4\n0\n")
    console.run()
    assert "Nessuna emergenza attiva da disattivare." in out.getvalue()


def test_run_reset_restores_configuration():
    console, _ = make_console("\n6\n1\n60\n\n9\n\n0\n")
    console.run()
    assert console.light.red_seconds == 30


def test_run_maintenance_enters_maintenance_state():
    console, _ = make_console("\n5\n0\n")
    console.run()
    assert console.light.state is LightState.MAINTENANCE
    assert console.light.mode is Mode.MAINTENANCE


def test_run_automatic_option_sets_mode():
    console, out = make_console("\n2\n0\n1\n\n0\n", auto_ticks=1)
    console.run()
    assert console.light.mode is Mode.AUTOMATIC
    assert "Modalità automatica terminata." in out.getvalue()