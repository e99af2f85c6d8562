"""Tests for confidence region rendering."""

import pytest

from pybdt.region import confidence_region, plot_confidence_region

matplotlib = pytest.importorskip("matplotlib")
matplotlib.use("Agg")


@pytest.fixture
def region_result():
    return confidence_region(tp=18, fp=1, fn=6, tn=92, one_sided=False)


class TestPlotConfidenceRegion:
    """Rendered elements."""

    def test_returns_axes(self, region_result):
        import matplotlib.pyplot as plt

        ax = plot_confidence_region(region_result)
        assert ax.get_xlim() == (0.0, 1.0)
        assert ax.get_ylim() == (0.0, 1.0)
        plt.close(ax.figure)

    def test_title_and_labels(self, region_result):
        import matplotlib.pyplot as plt

        ax = plot_confidence_region(region_result)
        assert ax.get_title().startswith("Joint 95% confidence region")
        assert ax.get_xlabel() == "1 - Specificity"
        assert ax.get_ylabel() == "Sensitivity"
        plt.close(ax.figure)

    def test_annotations_rounded(self, region_result):
        import matplotlib.pyplot as plt

        ax = plot_confidence_region(region_result)
        texts = [t.get_text() for t in ax.texts]
        assert any(t.startswith("Sensitivity: 0.75 (") for t in texts)
        assert any(t.startswith("1 - Specificity: 0.01 (") for t in texts)
        plt.close(ax.figure)

    def test_rectangle_spans_region(self, region_result):
        import matplotlib.pyplot as plt

        ax = plot_confidence_region(region_result)
        (rect,) = ax.patches
        assert rect.get_x() == pytest.approx(region_result.fpf_min)
        assert rect.get_y() == pytest.approx(region_result.tpf_min)
        assert rect.get_width() == pytest.approx(region_result.fpf_max - region_result.fpf_min)
        assert rect.get_height() == pytest.approx(region_result.tpf_max - region_result.tpf_min)
        assert not rect.get_fill()
        plt.close(ax.figure)

    def test_dashed_diagonal(self, region_result):
        import matplotlib.pyplot as plt

        ax = plot_confidence_region(region_result)
        (line,) = ax.lines
        assert line.get_linestyle() == "--"
        assert list(line.get_xdata()) == [0, 1]
        assert list(line.get_ydata()) == [0, 1]
        plt.close(ax.figure)

    def test_equal_aspect(self, region_result):
        import matplotlib.pyplot as plt

        ax = plot_confidence_region(region_result)
        assert ax.get_aspect() in ("equal", 1.0)
        plt.close(ax.figure)

    def test_existing_axes(self, region_result):
        import matplotlib.pyplot as plt

        fig, ax = plt.subplots()
        assert plot_confidence_region(region_result, ax=ax) is ax
        plt.close(fig)
