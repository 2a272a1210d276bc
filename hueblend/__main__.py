# Copyright (c) 2026 Hueblend
# SPDX-License-Identifier: MIT

from hueblend.cli import run

if __name__ == "__main__":
    run()
