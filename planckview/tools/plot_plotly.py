# -*- coding: utf-8 -*-
"""
Functions to plot a :py:class:`~planckview.spectrum.dataset.RenderableDataset`
with Plotly

Examples
--------
::

    from planckview import compute_dataset
    from planckview.tools.plot_plotly import plot_dataset

    plot_dataset(compute_dataset(5850), writefile="planck.html")


-------------------------------------------------------------------------------


"""

import plotly.graph_objs as go
import plotly.offline as py

from planckview.misc.utils import round_half_up
from planckview.tools.controls import YRangeStepper

PEAK_COLOR = "#d62728"


def make_main_trace(dataset):
    """Spectral radiance curve, drawn with the curve color of the dataset"""
    return go.Scatter(
        x=dataset.wavelength_um,
        y=dataset.radiance,
        mode="lines",
        name="Spectral radiance",
        showlegend=True,
        line=dict(color=dataset.curve_color, width=2),
    )


def make_peak_trace(dataset):
    """Vertical dashed line at the peak wavelength, from 0 to the maximum of
    the spectrum"""
    peak = dataset.peak_wavelength_um
    return go.Scatter(
        x=[peak, peak],
        y=[0, dataset.max_radiance],
        mode="lines+markers",
        name="Peak wavelength",
        showlegend=True,
        line=dict(color=PEAK_COLOR, width=1, dash="dash"),
        marker=dict(size=10, color=PEAK_COLOR, opacity=1),  # easy to hover
    )


def make_highlight_shapes(dataset):
    """Translucent rectangles over the visible band, one per highlight
    segment"""
    return [
        dict(
            type="rect",
            xref="x",
            yref="paper",
            x0=b.start_um,
            x1=b.end_um,
            y0=0,
            y1=1,
            fillcolor=b.rgba,
            line=dict(width=0),
        )
        for b in dataset.highlights
    ]


def make_figure(dataset, yrange=None):
    """Returns a Plotly figure of the blackbody spectrum.

    Parameters
    ----------
    dataset: RenderableDataset
    yrange: (float, float), or None
        y-axis range (W.sr-1.m-3). If None, use the initial preset of
        :py:class:`~planckview.tools.controls.YRangeStepper`

    Returns
    -------
    fig: plotly.graph_objs.Figure
    """
    if yrange is None:
        yrange = YRangeStepper().yrange

    layout = go.Layout(
        title="Planck's law - Temperature: {0} K".format(
            round_half_up(dataset.temperature)
        ),
        xaxis=dict(
            title=dict(text="Wavelength λ (µm)", standoff=15),
            type="log",
            autorange=True,
        ),
        yaxis=dict(
            title=dict(text="Spectral radiance I(λ,T) (W·sr⁻¹·m⁻³)", standoff=15),
            autorange=False,
            exponentformat="e",
            showexponent="all",
            range=list(yrange),
        ),
        legend=dict(orientation="h"),
        margin=dict(t=60, r=100),
        paper_bgcolor="black",
        font=dict(color="white"),
        plot_bgcolor="#111111",
        hovermode="closest",
        shapes=make_highlight_shapes(dataset),
    )

    return go.Figure(data=[make_main_trace(dataset), make_peak_trace(dataset)], layout=layout)


def plot_dataset(dataset, yrange=None, writefile=None, auto_open=False):
    """Plot the blackbody spectrum with Plotly.

    Parameters
    ----------
    dataset: RenderableDataset
    yrange: (float, float), or None
        see :py:func:`~planckview.tools.plot_plotly.make_figure`
    writefile: str, or None
        if not None, write the figure to this HTML file
    auto_open: bool
        open the HTML file in a browser

    Returns
    -------
    fig: plotly.graph_objs.Figure
    """
    fig = make_figure(dataset, yrange=yrange)

    if writefile:
        py.plot(fig, filename=writefile, auto_open=auto_open)

    return fig
