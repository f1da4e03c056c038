# SPDX-FileCopyrightText: 2021 Rose Davidson <rose@metaclassical.com>
#
# SPDX-License-Identifier: GPL-3.0-or-later

# Key event stages
# hook level (not part of this package):
# stage 0: OS-specific; catch native key signals and translate scan codes into virtual key codes
#
# this package:
# stage 1: build a KeyEvent, rejecting typed events that carry a key code or no character
# stage 2: resolve key codes into display names and action-key flags for listeners
# stage 3: record, replay and describe events for diagnostics
