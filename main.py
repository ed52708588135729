#===============================================================================
#  BrowserPort  |  Cross-platform Browser Picker
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-10-19
#  Last Update : 2026-10-19
#
#  Summary
#  -------
#  Registers as the system's http/https handler, and every time a link is
#  opened shows a small picker with the browsers installed on this machine.
#  Supports:
#    - Chrome, Firefox, Safari, Edge, Brave, Chromium, Tor Browser, Opera,
#      Vivaldi, Firefox Developer Edition, LibreWolf, Arc
#    - Extra browsers listed in browserport_config.json
#    - Keyboard picking (arrows/Enter, 1-9, Esc)
#    - One running instance; later launches hand their URL to it
#    - Tray icon with an update check
#
#  Usage
#  -----
#    python main.py [URL]             -> run (or hand URL to the running app)
#    python main.py --register        -> become the http/https handler
#    python main.py --list-browsers   -> print what was detected
#    python main.py --dev             -> show a placeholder URL on start
#
#  Copyright & License Notes
#  -------------------------
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#
#  This source code is provided "AS IS", without warranty of any kind, express
#  or implied, including but not limited to the warranties of merchantability,
#  fitness for a particular purpose, and noninfringement.
#
#  Third-Party Components
#  ----------------------
#  This project uses third-party libraries (PySide6, requests) which are
#  licensed separately by their respective authors. Ensure compliance with
#  their license terms when distributing this software.
#===============================================================================

import sys

from browserport.app import main


if __name__ == "__main__":
    sys.exit(main())
