from matplotlib.figure import Figure

CHART_TITLE = "Flashcard Update Frequency"


def build_update_figure(manager, figsize=(7, 2.5), dpi=100):
    """
    Line chart of how many history entries fall on each day, oldest first.
    """
    points = manager.aggregate_updates_by_date()

    fig = Figure(figsize=figsize, dpi=dpi)
    ax = fig.add_subplot(111)
    ax.set_title(CHART_TITLE)
    ax.set_xlabel("Date")
    ax.set_ylabel("Updates")

    if not points:
        ax.text(0.5, 0.5, "No updates yet", ha="center", va="center", transform=ax.transAxes)
        ax.set_xticks([])
        ax.set_yticks([])
        return fig

    dates = [d for d, _ in points]
    counts = [c for _, c in points]
    ax.plot(dates, counts, marker="o", linestyle="-")
    ax.set_ylim(bottom=0)
    ax.grid(True)
    fig.autofmt_xdate()
    fig.tight_layout()
    return fig
