"""Example: forward notes from one port to another.

This example demonstrates:
- Listing MIDI ports
- Handling the error raised for a handler of the wrong size
- Registering and clearing handlers
- Driving MidiInput.pump() from your own loop
- Turning the mod wheel into a 14-bit NRPN on the output
"""

import logging
import time

from midipump import MidiInput, MidiOutput, StatusType, WrongArityError

logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)

logger = logging.getLogger(__name__)

# NRPN driven by the mod wheel
NRPN_NUMBER = 1000


def main():
    inputs = MidiInput.device_list()
    print(f"inputs: {len(inputs)}")
    for name in inputs:
        print(f"\t{name}")

    with MidiInput(0) as midi_in, MidiOutput(0) as midi_out:
        try:
            midi_in.register_3byte(StatusType.SYSEX_BEGIN, lambda chan, num, val: None)
        except WrongArityError as e:
            print(f"got expected error: {e}")

        def on_note(on, chan, num, velocity):
            midi_out.send_note(on, chan, num, velocity)

        def on_mod_wheel(chan, num, val):
            if num == 1:
                # Scale 0-127 to the 14-bit range
                midi_out.send_nrpn(chan, NRPN_NUMBER, val << 7)

        midi_in.register_note(on_note)
        midi_in.register_3byte(StatusType.CONTROL_CHANGE, on_mod_wheel)
        midi_in.register_realtime(lambda status: None)
        midi_in.register_realtime(None)  # clear it

        logger.info(f"Forwarding {midi_in.name} -> {midi_out.name}, Ctrl+C to stop")
        try:
            while True:
                midi_in.pump()
                time.sleep(0.001)
        except KeyboardInterrupt:
            logger.info("Stopped")


if __name__ == "__main__":
    main()
