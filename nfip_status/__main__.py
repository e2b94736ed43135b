import sys

from nfip_status.cli import main

sys.exit(main())
