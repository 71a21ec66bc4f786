from __future__ import annotations
from .models.document import Document

def plot_segments(doc: Document):
    """Bar chart of segment lengths in file order, for sanity-checking."""
    import matplotlib.pyplot as plt
    labels = [f"{s.type:04X}" for s in doc.segments]
    lengths = [s.length for s in doc.segments]
    plt.figure()
    plt.bar(range(len(lengths)), lengths, tick_label=labels)
    plt.xlabel("Segment marker")
    plt.ylabel("Length (bytes)")
    plt.title("Segment layout (sanity plot)")
    plt.show()
