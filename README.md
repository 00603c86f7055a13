# rmcontrol

Pieces of the on-robot software for a competition robot that talks to the
referee system over a serial link and draws a HUD on the operator's client.

## Modules

- `rmcontrol.crc`: the CRC8 and CRC16 checksums of the referee serial
  protocol: `crc8`, `crc16`, `verify_crc8`, `verify_crc16`, `append_crc8`,
  `append_crc16`.
- `rmcontrol.protocol`: command ids and enums (`RefereeCmdId`, `DataCmdId`,
  `RobotId`, `ClientId`, `GraphOperation`, `GraphColor`, `GraphType`) and the
  packed little-endian records `FrameHeader`, `GameStatus`, `GameResult`,
  `RefereeWarning`, `GameRobotStatus`, `PowerHeatData`, `BulletAllowance` and
  `GraphConfig`, each with `unpack` (and `pack` where the robot sends it).
- `rmcontrol.referee`: `RefereeReceiver`, which takes raw serial bytes,
  finds frames, checks both CRCs and stores the decoded records in a
  `RefereeInfo`.
- `rmcontrol.ui`: client graphics (`GraphData`, `FloatData`, `StringData`),
  the helpers `line_draw`, `rectangle_draw`, `circle_draw`, `arc_draw`,
  `float_draw`, `string_draw`, and `UIFramer`, which wraps graphics into
  complete frames with sequence numbers and CRCs and hands each frame to a
  sink you supply.
- `rmcontrol.ui_panel`: `UIPanel`, a small friction-wheel and spin indicator
  panel.
- `rmcontrol.ui_custom`: `CustomUI`, the HUD with crosshair (plain or with
  ballistic rulers), capacitor bar, status text and auto-aim box.
- `rmcontrol.ui_text`: the status strings the HUD shows (`state_str`,
  `cap_text_format`, `spin_state_str`, `fric_state_str`, `int_to_str`).
- `rmcontrol.ramp`: `Ramp`, a rate limiter that moves its output towards a
  target by a fixed step per update.
- `rmcontrol.device_base`: `DeviceBase`, offline detection for devices that
  report periodically, with an injectable clock.

## Install

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Examples

Decoding a referee frame:

```python
import struct

from rmcontrol.crc import append_crc8, append_crc16
from rmcontrol.protocol import FrameHeader, RefereeCmdId
from rmcontrol.referee import RefereeReceiver

header = append_crc8(FrameHeader(data_length=6).pack())
body = struct.pack("<HHHH", RefereeCmdId.BULLET_REMAINING_CMD, 50, 0, 0)
frame = append_crc16(header + body + b"\0\0")

receiver = RefereeReceiver()
print(receiver.unpack(frame))                                       # 15
print(receiver.info.bullet_allowance_data.bullet_allowance_num_17_mm)  # 50
```

`RefereeReceiver.feed` shifts each read (shorter than 256 bytes) into the
end of a 256-byte window and scans only the front 128 positions, so a frame
is decoded once later reads have pushed it forward. It returns the command
ids decoded in that pass.

Sending graphics to the operator client:

```python
from rmcontrol.protocol import GraphColor, GraphOperation
from rmcontrol.ui import UIFramer, line_draw
from rmcontrol.ui_text import state_str

frames = []
framer = UIFramer(frames.append)
framer.refresh(line_draw("L1", GraphOperation.ADD, 0, GraphColor.ORANGE, 3, 810, 540, 1110, 540))
print(len(frames[0]))  # 30: header, interaction header, one 15-byte graphic, CRC16

print(repr(state_str(85, 1, 0)))  # 'FRIC OFF\nSPIN ON \n085'
```

`UIFramer.refresh` accepts 1, 2, 5 or 7 graphics and raises `ValueError`
for any other count. `CustomUI` takes a `delay` callable for the pauses
between frames, so it can be driven without sleeping.

## What it does not do

- It opens no serial port or CAN bus: bytes are passed to
  `RefereeReceiver.feed` and frames come out through the `UIFramer` sink.
- It has no PID or other feedback controllers, no chassis kinematics, no
  chassis power limiting, and no decoding of motors, IMU, remote control
  or super-capacitor messages.
- It has no command-line program.

The package has no dependencies beyond the standard library.