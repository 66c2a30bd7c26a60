#!/usr/bin/env python3

##############################################
#                                            #
#           THINK → ACT → OBSERVE            #
#                                            #
##############################################

from react_agent.cli import main


if __name__ == "__main__":
    raise SystemExit(main())
