# SPDX-License-Identifier: MIT
# SPDX-FileCopyrightText: 2024 Tobias Hienzsch

import click

from portflare.port import design
from portflare.schematic import render


@click.group(help='Flared port.')
def port():
    pass


port.add_command(design.report)
port.add_command(design.sweep)
port.add_command(design.table)
port.add_command(render.main)
