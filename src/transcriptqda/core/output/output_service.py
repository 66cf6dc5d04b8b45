"""
Output Service for transcriptqda.

This module provides a centralized service for handling all file output
operations, so every analysis module writes the same directory layout:

    <output_dir>/<module>/data/<name>.csv|json
    <output_dir>/<module>/charts/<name>.png
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import pandas as pd

from transcriptqda.core.utils.artifact_writer import (
    write_dataframe_csv,
    write_figure,
    write_json,
)
from transcriptqda.core.utils.lazy_imports import get_matplotlib_pyplot
from transcriptqda.core.utils.logger import log_file_operation
from transcriptqda.core.viz.mpl_renderer import render_mpl
from transcriptqda.core.viz.specs import ChartSpec


@dataclass(frozen=True)
class OutputStructure:
    """Directories owned by one module's output service."""

    module_dir: Path
    data_dir: Path
    charts_dir: Path


def create_output_structure(output_dir: Union[str, Path], module_name: str) -> OutputStructure:
    module_dir = Path(output_dir) / module_name
    return OutputStructure(
        module_dir=module_dir,
        data_dir=module_dir / "data",
        charts_dir=module_dir / "charts",
    )


class OutputService:
    """
    Service for handling all output operations in transcriptqda.

    Directories are created lazily on first write, so a module that saves
    nothing leaves no trace on disk.
    """

    def __init__(
        self,
        output_dir: Union[str, Path],
        module_name: str,
        dpi: int = 300,
        save_charts: bool = True,
    ):
        """
        Initialize the output service for a module.

        Args:
            output_dir: Base output directory for the run
            module_name: Name of the analysis module
            dpi: Resolution for saved charts
            save_charts: Whether modules should render and save charts
        """
        self.output_dir = Path(output_dir)
        self.module_name = module_name
        self.dpi = dpi
        self.save_charts = save_charts
        self.output_structure = create_output_structure(self.output_dir, module_name)
        self._artifacts: List[Dict[str, Any]] = []

    def _record_artifact(self, path: Path, artifact_type: str) -> None:
        try:
            relative_path = path.relative_to(self.output_dir).as_posix()
        except ValueError:
            relative_path = path.as_posix()
        self._artifacts.append(
            {
                "path": str(path),
                "relative_path": relative_path,
                "artifact_type": artifact_type,
            }
        )
        log_file_operation("write", str(path), success=True)

    def save_data(
        self,
        data: Union[pd.DataFrame, Dict[str, Any], List[Any]],
        filename: str,
        format_type: str = "csv",
    ) -> str:
        """
        Save data in the specified format.

        Args:
            data: A DataFrame (CSV or JSON records) or a JSON-serializable object
            filename: Name of the file (without extension)
            format_type: "csv" or "json"

        Returns:
            Path to the saved file
        """
        if format_type == "csv":
            if not isinstance(data, pd.DataFrame):
                raise ValueError("CSV format requires a DataFrame")
            file_path = self.output_structure.data_dir / f"{filename}.csv"
            write_dataframe_csv(file_path, data)
        elif format_type == "json":
            file_path = self.output_structure.data_dir / f"{filename}.json"
            if isinstance(data, pd.DataFrame):
                data = data.to_dict(orient="records")
            write_json(file_path, data)
        else:
            raise ValueError(f"Unsupported format type: {format_type}")

        self._record_artifact(file_path, format_type)
        return str(file_path)

    def save_chart(
        self,
        spec: Optional[ChartSpec] = None,
        *,
        figure: Optional[Any] = None,
        name: Optional[str] = None,
    ) -> str:
        """
        Save a chart as PNG and close its figure.

        Pass either a ChartSpec (rendered with matplotlib) or an already
        built matplotlib ``figure`` together with a ``name``.
        """
        if spec is not None:
            figure = render_mpl(spec)
            name = spec.name
        if figure is None or not name:
            raise ValueError("save_chart requires a spec, or a figure and a name")

        plt = get_matplotlib_pyplot()
        file_path = self.output_structure.charts_dir / f"{name}.png"
        try:
            write_figure(file_path, figure, dpi=self.dpi)
        finally:
            plt.close(figure)

        self._record_artifact(file_path, "png")
        return str(file_path)

    def get_artifacts(self) -> List[Dict[str, Any]]:
        return list(self._artifacts)


def create_output_service(
    output_dir: Union[str, Path],
    module_name: str,
    dpi: int = 300,
    save_charts: bool = True,
) -> OutputService:
    """Create an output service for a module."""
    return OutputService(output_dir, module_name, dpi=dpi, save_charts=save_charts)
