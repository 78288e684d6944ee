import sys

from hexagonal_users.main import main

sys.exit(main())
