import sys

from bip39ssh_core.cli import main

sys.exit(main())
