"""Traffic light state machine with timers, emergency handling and statistics."""

from __future__ import annotations

import time
from enum import Enum
from typing import Callable, Optional

DEFAULT_RED_SECONDS = 30
DEFAULT_YELLOW_SECONDS = 5
DEFAULT_GREEN_SECONDS = 25
VEHICLES_PER_CYCLE = 15
MAX_REASON_LENGTH = 99
NO_EMERGENCY = "Nessuna emergenza"

RESET = "\033[0m"
RED = "\033[31m"
YELLOW = "\033[33m"
GREEN = "\033[32m"
BOLD = "\033[1m"
BLINK = "\033[5m"

_RULE = "━" * 42
_WIDE_RULE = "━" * 66
_YES_NO = {True: "Sì", False: "No"}


class LightState(Enum):
    """States a traffic light can be in."""

    RED = "ROSSO"
    YELLOW = "GIALLO"
    GREEN = "VERDE"
    OFF = "SPENTO"
    EMERGENCY = "EMERGENZA"
    MAINTENANCE = "MANUTENZIONE"


class Mode(Enum):
    """Operating modes of the traffic light."""

    AUTOMATIC = "Automatica"
    MANUAL = "Manuale"
    EMERGENCY = "Emergenza"
    MAINTENANCE = "Manutenzione"


_STATE_COLORS = {
    LightState.RED: RED,
    LightState.YELLOW: YELLOW,
    LightState.GREEN: GREEN,
    LightState.EMERGENCY: BLINK + YELLOW,
}

_CYCLE = {
    LightState.RED: LightState.GREEN,
    LightState.GREEN: LightState.YELLOW,
    LightState.YELLOW: LightState.RED,
}


def next_cyclic_state(state: LightState) -> LightState:
    """Return the state that follows ``state`` in the automatic cycle."""
    return _CYCLE.get(state, LightState.RED)


def state_name(state: LightState) -> str:
    """Return the display name of a light state."""
    return state.value


def mode_name(mode: Mode) -> str:
    """Return the display name of an operating mode."""
    return mode.value


class TrafficLight:
    """A single traffic light with configurable durations and counters."""

    def __init__(self, clock: Callable[[], float] = time.time) -> None:
        self.clock = clock
        self.reset()

    def reset(self) -> None:
        """Restore the initial state, durations, counters and settings."""
        self.state = LightState.RED
        self.mode = Mode.AUTOMATIC
        self.last_change = int(self.clock())
        self.load_default_configuration()
        self.remaining_seconds = self.red_seconds
        self.cycles_completed = 0
        self.emergencies = 0
        self.total_running_seconds = 0
        self.vehicles_estimate = 0
        self.emergency_active = False
        self.emergency_started = 0
        self.emergency_reason = NO_EMERGENCY

    def load_default_configuration(self) -> None:
        """Reset durations and display settings to their defaults."""
        self.red_seconds = DEFAULT_RED_SECONDS
        self.yellow_seconds = DEFAULT_YELLOW_SECONDS
        self.green_seconds = DEFAULT_GREEN_SECONDS
        self.sounds_enabled = True
        self.colored_display = True
        self.led_intensity = 100

    def change_state(self, new_state: LightState) -> LightState:
        """Switch to ``new_state`` and return the previous state.

        Raises RuntimeError when an emergency is active and the new state is
        not the emergency state.
        """
        if self.emergency_active and new_state is not LightState.EMERGENCY:
            raise RuntimeError("Impossibile cambiare stato durante emergenza!")
        previous = self.state
        self.state = new_state
        self.last_change = int(self.clock())
        if new_state is LightState.RED:
            self.remaining_seconds = self.red_seconds
            if previous is LightState.YELLOW:
                self.cycles_completed += 1
                self.vehicles_estimate += VEHICLES_PER_CYCLE
        elif new_state is LightState.YELLOW:
            self.remaining_seconds = self.yellow_seconds
        elif new_state is LightState.GREEN:
            self.remaining_seconds = self.green_seconds
        elif new_state is LightState.EMERGENCY:
            self.remaining_seconds = -1
        else:
            self.remaining_seconds = 0
        return previous

    def update_automatic(self, now: Optional[float] = None) -> Optional[LightState]:
        """Advance the timers; return the previous state if a change happened."""
        if self.mode is not Mode.AUTOMATIC or self.emergency_active:
            return None
        current = int(self.clock() if now is None else now)
        elapsed = current - self.last_change
        self.remaining_seconds -= elapsed
        self.total_running_seconds += elapsed
        if self.remaining_seconds <= 0:
            return self.change_state(next_cyclic_state(self.state))
        return None

    def activate_emergency(self, reason: str, now: Optional[float] = None) -> None:
        """Enter emergency mode for the given reason."""
        self.emergency_active = True
        self.mode = Mode.EMERGENCY
        self.emergency_started = int(self.clock() if now is None else now)
        self.emergencies += 1
        self.emergency_reason = reason[:MAX_REASON_LENGTH]
        self.change_state(LightState.EMERGENCY)

    def deactivate_emergency(self, now: Optional[float] = None) -> int:
        """Leave emergency mode and return how long it lasted in seconds."""
        if not self.emergency_active:
            raise RuntimeError("Nessuna emergenza attiva da disattivare.")
        self.emergency_active = False
        self.mode = Mode.AUTOMATIC
        self.change_state(LightState.RED)
        current = int(self.clock() if now is None else now)
        self.emergency_reason = NO_EMERGENCY
        return current - self.emergency_started

    def render_graphic(self) -> str:
        """Return an ASCII drawing of the light."""
        lamp = {
            LightState.RED: "🔴",
            LightState.YELLOW: "🟡",
            LightState.GREEN: "🟢",
        }

        def bulb(state: LightState) -> str:
            return lamp[state] if self.state is state else "⚫"

        lines = [
            "     ┌─────────┐",
            f"     │    {bulb(LightState.RED)}    │  {RED}ROSSO{RESET}",
            f"     │    {bulb(LightState.YELLOW)}    │  {YELLOW}GIALLO{RESET}",
            f"     │    {bulb(LightState.GREEN)}    │  {GREEN}VERDE{RESET}",
            "     └─────────┘",
        ]
        if self.state is LightState.EMERGENCY:
            lines.append(f"       {BLINK}⚠️ EMERGENZA ⚠️{RESET}")
        elif self.state is LightState.OFF:
            lines.append("       ⚫ SPENTO ⚫")
        return "\n".join(lines)

    def render_status(self) -> str:
        """Return the status panel shown above the main menu."""
        color = _STATE_COLORS.get(self.state, RESET)
        lines = [
            f"\n{BOLD}🚦 STATO SEMAFORO:{RESET}",
            _RULE,
            self.render_graphic(),
            f"📍 Stato corrente: {color}{state_name(self.state)}{RESET}",
            f"🎮 Modalità: {mode_name(self.mode)}",
        ]
        if self.remaining_seconds > 0:
            lines.append(f"⏱️  Tempo rimanente: {self.remaining_seconds} secondi")
        if self.emergency_active:
            lines.append(f"{BLINK}🚨 EMERGENZA ATTIVA: {self.emergency_reason}{RESET}")
        lines.append(f"🔄 Cicli completati: {self.cycles_completed}")
        lines.append(f"🚗 Veicoli passati (stima): {self.vehicles_estimate}")
        return "\n".join(lines)

    def render_statistics(self, now: Optional[float] = None) -> str:
        """Return a detailed statistics report."""
        lines = [
            "\n📊 STATISTICHE DETTAGLIATE",
            _WIDE_RULE,
            "🚦 STATO E MODALITÀ:",
            f"   • Stato corrente: {state_name(self.state)}",
            f"   • Modalità: {mode_name(self.mode)}",
            f"   • Emergenza attiva: {_YES_NO[bool(self.emergency_active)]}",
            "\n⏱️ TEMPORIZZAZIONI:",
            f"   • Durata Rosso: {self.red_seconds} secondi",
            f"   • Durata Giallo: {self.yellow_seconds} secondi",
            f"   • Durata Verde: {self.green_seconds} secondi",
            f"   • Tempo rimanente: {self.remaining_seconds} secondi",
            "\n📈 CONTATORI:",
            f"   • Cicli completati: {self.cycles_completed}",
            f"   • Emergenze gestite: {self.emergencies}",
            f"   • Tempo totale funzionamento: {self.total_running_seconds} secondi",
            f"   • Veicoli passati (stima): {self.vehicles_estimate}",
        ]
        if self.cycles_completed > 0:
            cycle = self.red_seconds + self.yellow_seconds + self.green_seconds
            per_cycle = self.vehicles_estimate / self.cycles_completed
            per_vehicle = (
                self.total_running_seconds / self.vehicles_estimate
                if self.vehicles_estimate > 0
                else 0.0
            )
            lines += [
                "\n🧮 CALCOLI:",
                f"   • Durata ciclo completo: {cycle} secondi",
                f"   • Veicoli per ciclo (media): {per_cycle:.1f}",
                f"   • Tempo medio per veicolo: {per_vehicle:.1f} secondi",
            ]
        lines += [
            "\n⚙️ CONFIGURAZIONE:",
            f"   • Suoni attivi: {_YES_NO[bool(self.sounds_enabled)]}",
            f"   • Display colorato: {_YES_NO[bool(self.colored_display)]}",
            f"   • Intensità LED: {self.led_intensity}%",
        ]
        if self.emergency_active:
            current = int(self.clock() if now is None else now)
            lines += [
                "\n🚨 EMERGENZA:",
                f"   • Motivo: {self.emergency_reason}",
                f"   • Durata: {current - self.emergency_started} secondi",
            ]
        return "\n".join(lines)