"""Interactive console for driving a traffic light."""

from __future__ import annotations

import os
import re
import subprocess
import sys
import time
from typing import Callable, Optional, Sequence, TextIO

from simulab.traffic_light import (
    BOLD,
    RESET,
    LightState,
    Mode,
    TrafficLight,
    mode_name,
    state_name,
)

CYAN = "\033[36m"
_RULE = "━" * 42
_INT = re.compile(r"\s*([+-]?\d+)")

_BANNER = "\n".join(
    [
        "╔══════════════════════════════════════════════════════════════╗",
        "║                    🚦 SIMULATORE SEMAFORO 🚦                 ║",
        "║                                                              ║",
        "║          Sistema Avanzato di Controllo Traffico             ║",
        "║                                                              ║",
        "║  Funzionalità:                                               ║",
        "║  • Modalità automatica e manuale                            ║",
        "║  • Sistema di emergenza integrato                           ║",
        "║  • Statistiche in tempo reale                               ║",
        "║  • Configurazione personalizzabile                          ║",
        "║  • Interfaccia grafica ASCII                                ║",
        "║                                                              ║",
        "║              Versione 2.0 - Maggio 2025                     ║",
        "╚══════════════════════════════════════════════════════════════╝",
    ]
)

_MAIN_MENU = "\n".join(
    [
        f"\n{BOLD}📋 MENU PRINCIPALE:{RESET}",
        _RULE,
        "1️⃣  Modalità automatica",
        "2️⃣  Controllo manuale",
        "3️⃣  🚨 Attiva emergenza",
        "4️⃣  ✅ Disattiva emergenza",
        "5️⃣  🔧 Modalità manutenzione",
        "6️⃣  ⚙️  Configurazione",
        "7️⃣  📊 Statistiche",
        "8️⃣  🔄 Test ciclico",
        "9️⃣  🔄 Reset sistema",
        "0️⃣  🚪 Esci",
        _RULE,
    ]
)


def _clear_screen() -> None:
    command = "cls" if os.name == "nt" else "clear"
    try:
        subprocess.run(command, shell=os.name == "nt", check=False)
    except OSError:
        pass


def _on_off(flag: bool, on: str, off: str) -> str:
    return on if flag else off


class TrafficConsole:
    """Menu-driven front end for a :class:`TrafficLight`."""

    def __init__(
        self,
        light: Optional[TrafficLight] = None,
        stdin: Optional[TextIO] = None,
        stdout: Optional[TextIO] = None,
        sleep: Callable[[float], None] = time.sleep,
        clear: Callable[[], None] = _clear_screen,
        auto_ticks: Optional[int] = None,
    ) -> None:
        self.light = light if light is not None else TrafficLight()
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout
        self.sleep = sleep
        self.clear = clear
        self.auto_ticks = auto_ticks

    def _say(self, text: str = "", end: str = "\n") -> None:
        self.stdout.write(text + end)
        self.stdout.flush()

    def _pause(self) -> None:
        self._say("\nPremere INVIO per continuare...", end="")
        self.stdin.readline()

    def read_int(self, prompt: str, minimum: int, maximum: int) -> int:
        """Prompt until an integer within the range is entered."""
        while True:
            self._say(f"{prompt} (range: {minimum}-{maximum}): ", end="")
            line = self.stdin.readline()
            if line == "":
                raise EOFError("input terminated")
            match = _INT.match(line)
            if match:
                value = int(match.group(1))
                if minimum <= value <= maximum:
                    return value
            self._say(f"❌ Errore: inserire un numero tra {minimum} e {maximum}.")

    def read_text(self, prompt: str) -> str:
        """Prompt for a line of text and return it without the newline."""
        self._say(f"{prompt}: ", end="")
        line = self.stdin.readline()
        return line[:-1] if line.endswith("\n") else line

    def _change(self, state: LightState) -> bool:
        try:
            previous = self.light.change_state(state)
        except RuntimeError as error:
            self._say(f"⚠️ {error}")
            return False
        self._say(f"🔄 Cambio stato: {state_name(previous)} → {state_name(state)}")
        return True

    def manual_control(self) -> None:
        """Let the user pick the light state step by step."""
        choices = {
            1: LightState.RED,
            2: LightState.YELLOW,
            3: LightState.GREEN,
            4: LightState.OFF,
        }
        self._say("\n🎮 MODALITÀ CONTROLLO MANUALE")
        self._say(_RULE)
        while True:
            self._say(self.light.render_graphic())
            self._say("\nControlli disponibili:")
            self._say("1. 🔴 Rosso")
            self._say("2. 🟡 Giallo")
            self._say("3. 🟢 Verde")
            self._say("4. ⚫ Spento")
            self._say("0. 🔙 Torna al menu")
            choice = self.read_int("Seleziona stato", 0, 4)
            if choice == 0:
                return
            self._change(choices[choice])
            self._say("\nPremere INVIO per continuare...", end="")
            self.stdin.readline()
            self.clear()

    def configuration_panel(self) -> None:
        """Show the configuration and change one setting."""
        light = self.light
        self._say("\n⚙️ PANNELLO CONFIGURAZIONE")
        self._say(_RULE)
        self._say("Configurazione attuale:")
        self._say(f"🔴 Durata Rosso: {light.red_seconds} secondi")
        self._say(f"🟡 Durata Giallo: {light.yellow_seconds} secondi")
        self._say(f"🟢 Durata Verde: {light.green_seconds} secondi")
        self._say(f"🔊 Suoni: {_on_off(light.sounds_enabled, 'Attivi', 'Disattivi')}")
        self._say(f"🎨 Colori: {_on_off(light.colored_display, 'Attivi', 'Disattivi')}")
        self._say("\nCosa vuoi modificare?")
        self._say("1. Durata Rosso")
        self._say("2. Durata Giallo")
        self._say("3. Durata Verde")
        self._say("4. Toggle Suoni")
        self._say("5. Toggle Colori")
        self._say("6. Reset configurazione")
        self._say("0. Torna al menu")

        choice = self.read_int("Seleziona opzione", 0, 6)
        if choice == 1:
            light.red_seconds = self.read_int("Nuova durata Rosso (secondi)", 10, 120)
        elif choice == 2:
            light.yellow_seconds = self.read_int("Nuova durata Giallo (secondi)", 3, 10)
        elif choice == 3:
            light.green_seconds = self.read_int("Nuova durata Verde (secondi)", 15, 60)
        elif choice == 4:
            light.sounds_enabled = not light.sounds_enabled
            self._say(f"Suoni {_on_off(light.sounds_enabled, 'attivati', 'disattivati')}")
        elif choice == 5:
            light.colored_display = not light.colored_display
            self._say(f"Colori {_on_off(light.colored_display, 'attivati', 'disattivati')}")
        elif choice == 6:
            light.load_default_configuration()
            self._say("Configurazione resettata ai valori di default.")
        if choice != 0:
            self._say("✅ Configurazione aggiornata!")
            self._pause()

    def automatic_simulation(self, max_ticks: Optional[int] = None) -> None:
        """Run the automatic cycle, one tick per second, until interrupted."""
        light = self.light
        self._say("\n🤖 MODALITÀ AUTOMATICA ATTIVATA")
        self._say(_RULE)
        self._say("Premere Ctrl+C per interrompere...\n")
        ticks = 0
        try:
            while (
                light.mode is Mode.AUTOMATIC
                and not light.emergency_active
                and (max_ticks is None or ticks < max_ticks)
            ):
                self.clear()
                self._say(light.render_status())
                previous = light.update_automatic()
                if previous is not None:
                    self._say(
                        f"🔄 Cambio stato: {state_name(previous)} → {state_name(light.state)}"
                    )
                self.sleep(1)
                self._say(
                    "\nPremere 'q' e INVIO per uscire dalla modalità automatica: ",
                    end="",
                )
                ticks += 1
        except KeyboardInterrupt:
            self._say()
        self._say("\n✅ Modalità automatica terminata.")
        self._pause()

    def cyclic_test(self) -> None:
        """Run three automatic updates, drawing the light after each."""
        self._say("\n🔄 Avvio test ciclico automatico...")
        for _ in range(3):
            previous = self.light.update_automatic()
            if previous is not None:
                self._say(
                    f"🔄 Cambio stato: {state_name(previous)} → {state_name(self.light.state)}"
                )
            self._say(self.light.render_graphic())
            self.sleep(1)
        self._pause()

    def _activate_emergency(self) -> None:
        reason = self.read_text("Motivo emergenza")
        previous = self.light.state
        self.light.activate_emergency(reason)
        self._say(
            f"🔄 Cambio stato: {state_name(previous)} → {state_name(LightState.EMERGENCY)}"
        )
        self._say("\n🚨 EMERGENZA ATTIVATA! 🚨")
        self._say(f"Motivo: {reason}")
        self._say(f"Tempo: {time.ctime(self.light.emergency_started)}")
        self._say("Il semaforo è ora in modalità emergenza.")

    def _deactivate_emergency(self) -> None:
        previous = self.light.state
        try:
            duration = self.light.deactivate_emergency()
        except RuntimeError as error:
            self._say(f"⚠️ {error}")
            return
        self._say(f"🔄 Cambio stato: {state_name(previous)} → {state_name(LightState.RED)}")
        self._say("\n✅ EMERGENZA DISATTIVATA")
        self._say(f"Durata emergenza: {duration} secondi")
        self._say("Ritorno alla modalità automatica.")

    def _maintenance(self) -> None:
        if self._change(LightState.MAINTENANCE):
            self.light.mode = Mode.MAINTENANCE
            self._say("🔧 Semaforo in manutenzione.")

    def run(self) -> int:
        """Run the main menu loop and return the exit status."""
        light = self.light
        self.clear()
        self._say(f"{BOLD}{CYAN}{_BANNER}\n{RESET}", end="")
        self._say("\n🚦 Sistema inizializzato correttamente!")
        self._say(f"Modalità: {mode_name(light.mode)}")
        self._say(f"Stato iniziale: {state_name(light.state)}\n")
        self._pause()

        while True:
            self.clear()
            self._say(light.render_status())
            self._say(_MAIN_MENU)
            choice = self.read_int("Seleziona opzione", 0, 9)
            if choice == 0:
                break
            if choice == 1:
                light.mode = Mode.AUTOMATIC
                self.automatic_simulation(self.auto_ticks)
            elif choice == 2:
                light.mode = Mode.MANUAL
                self.manual_control()
            elif choice == 3:
                self._activate_emergency()
            elif choice == 4:
                self._deactivate_emergency()
            elif choice == 5:
                self._maintenance()
            elif choice == 6:
                self.configuration_panel()
            elif choice == 7:
                self._say(light.render_statistics())
                self._pause()
            elif choice == 8:
                self.cyclic_test()
            elif choice == 9:
                self._say("\n🔄 Reset del sistema...")
                light.reset()
                self._say("Sistema resettato!")
                self._pause()

        self._say("\n📊 STATISTICHE FINALI:")
        self._say(_RULE)
        self._say(f"🔄 Cicli completati: {light.cycles_completed}")
        self._say(f"⚠️  Emergenze gestite: {light.emergencies}")
        self._say(f"⏱️  Tempo totale: {light.total_running_seconds} secondi")
        self._say(f"🚗 Veicoli stimati: {light.vehicles_estimate}")
        self._say("\n👋 Grazie per aver utilizzato il Simulatore Semaforo!")
        self._say("🚦 Sistema spento in sicurezza.\n")
        return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Start the interactive traffic light simulator."""
    try:
        return TrafficConsole().run()
    except (EOFError, KeyboardInterrupt):
        return 0


if __name__ == "__main__":
    sys.exit(main())