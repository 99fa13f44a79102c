# SPDX-License-Identifier: MIT
# SPDX-FileCopyrightText: 2024 Tobias Hienzsch

plot_styles = {
    'axes.edgecolor': 'white',
    'axes.facecolor': 'white',
    'axes.grid': True,
    'axes.grid.which': 'both',
    'axes.spines.left': False,
    'axes.spines.right': False,
    'axes.spines.top': False,
    'axes.spines.bottom': False,
    'figure.constrained_layout.use': True,
    'grid.color': '#CCCCCC',
    'grid.linewidth': '0.8',
    'xtick.color': '#666666',
    'xtick.major.bottom': True,
    'xtick.minor.bottom': False,
    'ytick.color': '#666666',
    'ytick.major.left': True,
    'ytick.minor.left': False,
}

schematic_styles = {
    'fill': 'brown',
    'outline': 'brown',
    'dimension': '#333333',
    'font_size': 8,
    'line_width': 1.0,
}
