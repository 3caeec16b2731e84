"""
Binary Search Tree Demo — Walkthroughs, height experiments, and visualizations.

Generates:
- viz/*.png — Individual visualization files
- report.pdf — Comprehensive PDF report
"""

import os
import sys

import numpy as np
import matplotlib.pyplot as plt
from matplotlib.backends.backend_pdf import PdfPages
from pathlib import Path

sys.path.insert(0, os.path.join(os.path.dirname(__file__), "src"))

from binary_search_tree import BinarySearchTree

SEED = 42
np.random.seed(SEED)

VIZ_DIR = Path(__file__).parent / "viz"
VIZ_DIR.mkdir(exist_ok=True)

SIZES = [8, 16, 32, 64, 128, 256, 512]
TRIALS = 30


def less_than(a, b):
    return a < b


def build_tree(keys):
    tree = BinarySearchTree(less_than)
    for key in keys:
        tree.insert(key)
    return tree


def depth_of(node):
    depth = 0
    while node.parent is not None:
        node = node.parent
        depth += 1
    return depth


def draw_tree(ax, tree, title, highlight=()):
    """Lay nodes out by in-order rank (x) and depth (y)."""
    keys = tree.keys()
    positions = {}
    for rank, key in enumerate(keys):
        node = tree.search(key)
        positions[key] = (rank, -depth_of(node))

    for key in keys:
        parent = tree.search(key).parent
        if parent is not None:
            x0, y0 = positions[parent.get()]
            x1, y1 = positions[key]
            ax.plot([x0, x1], [y0, y1], color="gray", linewidth=1.5, zorder=1)

    for key in keys:
        node = tree.search(key)
        x, y = positions[key]
        color = "#e74c3c" if key in highlight else "steelblue"
        ax.scatter([x], [y], s=900, color=color, zorder=2)
        ax.text(x, y + 0.05, str(key), ha="center", va="center", color="white",
                fontsize=12, fontweight="bold", zorder=3)
        ax.text(x, y - 0.3, f"h={node.height}", ha="center", fontsize=8, color="dimgray")

    ax.set_title(title)
    ax.set_xlim(-1, max(len(keys), 1))
    ax.set_ylim(-tree.height() - 1, 0.7)
    ax.axis("off")


def example_1_sample_tree():
    """Insert 5, 3, 8, 1, 4, 7, 9 and inspect the result."""
    print("=" * 60)
    print("Example 1: Building a Tree")
    print("=" * 60)

    tree = build_tree([5, 3, 8, 1, 4, 7, 9])
    location = tree.search(4)

    print(f"Dump:      {tree}")
    print(f"Keys:      {tree.keys()}")
    print(f"Size:      {tree.size()}")
    print(f"Height:    {tree.height()}")
    print(f"After 4:   {location.get_after().get()}")
    print(f"Before 4:  {location.get_before().get()}")
    print(f"Valid:     {tree.is_valid()}")

    fig, ax = plt.subplots(figsize=(8, 5))
    draw_tree(ax, tree, "Insert order 5, 3, 8, 1, 4, 7, 9", highlight=(4,))
    fig.tight_layout()
    path = VIZ_DIR / "01_sample_tree.png"
    fig.savefig(path, dpi=150)
    plt.close(fig)

    return path, tree


def example_2_two_child_removal():
    """Remove the root, which has two children, and watch its handle."""
    print("\n" + "=" * 60)
    print("Example 2: Removing a Node With Two Children")
    print("=" * 60)

    tree = build_tree([5, 3, 8, 1, 4, 7, 9])
    handle = tree.search(5)
    print(f"Before:        {tree}")

    tree.remove(5)
    print(f"After:         {tree}")
    print(f"Keys:          {tree.keys()}")
    print(f"Size:          {tree.size()}")
    print(f"Handle for 5:  now reads {handle.get()}")

    fig, ax = plt.subplots(figsize=(8, 5))
    draw_tree(ax, tree, "After remove(5): successor 7 copied into the root", highlight=(7,))
    fig.tight_layout()
    path = VIZ_DIR / "02_two_child_removal.png"
    fig.savefig(path, dpi=150)
    plt.close(fig)

    return path, tree


def example_3_height_growth():
    """Compare height under random and sorted insertion orders."""
    print("\n" + "=" * 60)
    print("Example 3: Height Growth by Insertion Order")
    print("=" * 60)

    np.random.seed(SEED)
    random_heights = []
    sorted_heights = []

    for n in SIZES:
        heights = []
        for _ in range(TRIALS):
            tree = build_tree(np.random.permutation(n).tolist())
            if not tree.is_valid():
                raise RuntimeError(f"tree failed validation after {n} random inserts")
            heights.append(tree.height())
        random_heights.append(np.mean(heights))
        sorted_heights.append(build_tree(range(n)).height())
        print(f"n={n:4d}: random mean height = {random_heights[-1]:6.2f}, "
              f"sorted height = {sorted_heights[-1]}")

    sizes = np.array(SIZES)
    fig, axes = plt.subplots(1, 2, figsize=(12, 5))

    axes[0].plot(sizes, sorted_heights, "o-", color="#e74c3c", linewidth=2, label="Sorted insertion")
    axes[0].plot(sizes, random_heights, "o-", color="steelblue", linewidth=2, label="Random insertion")
    axes[0].plot(sizes, sizes - 1, "k--", alpha=0.5, label="n - 1 (stick)")
    axes[0].set_xlabel("Number of keys")
    axes[0].set_ylabel("Height")
    axes[0].set_title("Height vs Size")
    axes[0].legend()
    axes[0].grid(True, alpha=0.3)

    axes[1].semilogx(sizes, random_heights, "o-", color="steelblue", linewidth=2, label="Random insertion")
    axes[1].semilogx(sizes, np.ceil(np.log2(sizes + 1)) - 1, "g--", linewidth=2, label="ceil(log2(n + 1)) - 1")
    axes[1].semilogx(sizes, 4.311 * np.log(sizes), ":", color="gray", label="4.311 ln n")
    axes[1].set_xlabel("Number of keys (log scale)")
    axes[1].set_ylabel("Height")
    axes[1].set_title("Random Insertion vs Minimum Height")
    axes[1].legend()
    axes[1].grid(True, alpha=0.3)

    fig.tight_layout()
    path = VIZ_DIR / "03_height_growth.png"
    fig.savefig(path, dpi=150)
    plt.close(fig)

    return path, (random_heights, sorted_heights)


def example_4_navigation_walk():
    """Walk the tree with successor and predecessor handles."""
    print("\n" + "=" * 60)
    print("Example 4: Walking With get_after / get_before")
    print("=" * 60)

    np.random.seed(SEED)
    keys = np.random.choice(100, size=20, replace=False).tolist()
    tree = build_tree(keys)

    forward = []
    node = tree.first()
    while node is not None:
        forward.append(node.get())
        node = node.get_after()

    backward = []
    node = tree.last()
    while node is not None:
        backward.append(node.get())
        node = node.get_before()

    print(f"Insert order: {keys}")
    print(f"Forward:      {forward}")
    print(f"Backward:     {backward}")
    print(f"Matches sorted: {forward == sorted(keys) and backward == sorted(keys, reverse=True)}")

    fig, ax = plt.subplots(figsize=(10, 6))
    ax.plot(range(len(keys)), keys, "o", color="gray", alpha=0.6, label="Insertion order")
    ax.plot(range(len(forward)), forward, "o-", color="steelblue", linewidth=2, label="get_after walk")
    ax.plot(range(len(backward)), backward, "s--", color="#e74c3c", linewidth=1.5, label="get_before walk")
    ax.set_xlabel("Step")
    ax.set_ylabel("Key")
    ax.set_title("In-Order Navigation Through Parent Links")
    ax.legend()
    ax.grid(True, alpha=0.3)
    fig.tight_layout()
    path = VIZ_DIR / "04_navigation_walk.png"
    fig.savefig(path, dpi=150)
    plt.close(fig)

    return path, tree


def generate_pdf_report(figures_data):
    """Generate comprehensive PDF report."""
    print("\n" + "=" * 60)
    print("Generating PDF Report")
    print("=" * 60)

    pdf_path = VIZ_DIR.parent / "report.pdf"

    with PdfPages(pdf_path) as pdf:
        # Title page
        fig = plt.figure(figsize=(11, 8.5))
        fig.text(0.5, 0.6, "Binary Search Tree", fontsize=36, ha="center", fontweight="bold")
        fig.text(0.5, 0.5, "Unbalanced, With Parent Links and Cached Heights", fontsize=20, ha="center")
        fig.text(0.5, 0.35, "Demonstration & Analysis Report", fontsize=18, ha="center", style="italic")
        fig.text(0.5, 0.2, f"Seed: {SEED}", fontsize=12, ha="center", color="gray")
        pdf.savefig(fig)
        plt.close(fig)

        # Summary page
        fig = plt.figure(figsize=(11, 8.5))
        fig.text(0.5, 0.95, "Summary", fontsize=24, ha="center", fontweight="bold")

        summary_text = """
This report exercises an unbalanced binary search tree ordered by a
caller-supplied less-than predicate. The implementation includes:

• Core operations:
  - search / contains / insert / remove, recursive from the root
  - height() in O(1) from per-node cached heights
  - keys() as an ascending in-order snapshot

• Location handles:
  - insert and search return the node holding the key
  - get_after / get_before walk parent links in O(h)
  - removing a two-child node copies its successor's key in place

Key Findings:
  1. Random insertion keeps height within a small factor of log2(n)
  2. Sorted insertion degenerates to a stick of height n - 1
  3. Successor/predecessor walks reproduce the sorted key order
"""
        fig.text(0.1, 0.85, summary_text, fontsize=12, ha="left", va="top",
                 fontfamily="monospace", linespacing=1.5)
        pdf.savefig(fig)
        plt.close(fig)

        # Add all figures
        for title, img_path in figures_data:
            fig = plt.figure(figsize=(11, 8.5))
            fig.text(0.5, 0.98, title, fontsize=14, ha="center", fontweight="bold")
            ax = fig.add_axes([0.05, 0.05, 0.9, 0.88])
            ax.imshow(plt.imread(img_path))
            ax.axis("off")
            pdf.savefig(fig)
            plt.close(fig)

    print(f"PDF report saved to: {pdf_path}")
    return pdf_path


def main():
    print("\n" + "#" * 60)
    print("#" + " " * 19 + "BINARY SEARCH TREE DEMO" + " " * 16 + "#")
    print("#" * 60)
    print(f"\nRandom seed: {SEED}")
    print(f"Output directory: {VIZ_DIR}")

    figures = []

    path1, _ = example_1_sample_tree()
    figures.append(("Example 1: Sample Tree", path1))

    path2, _ = example_2_two_child_removal()
    figures.append(("Example 2: Two-Child Removal", path2))

    path3, _ = example_3_height_growth()
    figures.append(("Example 3: Height Growth", path3))

    path4, _ = example_4_navigation_walk()
    figures.append(("Example 4: Navigation Walk", path4))

    generate_pdf_report(figures)

    print("\n" + "=" * 60)
    print("DEMO COMPLETE")
    print("=" * 60)
    print(f"\nGenerated files:")
    for f in sorted(VIZ_DIR.glob("*.png")):
        print(f"  - {f.relative_to(VIZ_DIR.parent)}")
    print(f"  - report.pdf")


if __name__ == "__main__":
    main()
