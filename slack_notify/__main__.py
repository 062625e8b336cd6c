import sys

from slack_notify.main import main

sys.exit(main())
