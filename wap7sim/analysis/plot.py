"""Trip chart: speed and odometer against command step."""

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt

from .trip_log import TripLog


def plot_trip(log: TripLog, output_path: str, title: str = "WAP-7 trip") -> str:
    """Save a two-panel chart of speed and distance per command step.

    Args:
        log: Journal of the session. Must not be empty.
        output_path: Image file to write; the format follows the extension.
        title: Figure title.

    Returns:
        str: ``output_path``.

    Raises:
        ValueError: If the journal is empty.
    """
    if not len(log):
        msg = "Cannot plot an empty trip log"
        raise ValueError(msg)

    df = log.to_frame()
    fig, (ax1, ax2) = plt.subplots(2, 1, figsize=(10, 7), height_ratios=[2, 1], sharex=True)
    try:
        ax1.step(df.index, df["speed_kmh"], where="post", color="tab:blue", label="Speed")
        ax1.set_ylabel("Speed (km/h)")
        ax1.set_title(title)
        ax1.grid(True, alpha=0.3)

        ax2.plot(df.index, df["distance_m"], marker="o", color="tab:green", label="Distance")
        ax2.set_ylabel("Distance (m)")
        ax2.set_xlabel("Command step")
        ax2.grid(True, alpha=0.3)

        plt.tight_layout()
        fig.savefig(output_path)
    finally:
        plt.close(fig)
    return output_path
