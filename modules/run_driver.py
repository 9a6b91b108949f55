# modules/run_driver.py

"""
Drives one conversion: reads the transcript line by line, routes each
classified line to the accumulator, and flushes the last file at the end.
"""

from dataclasses import dataclass, field
from typing import Iterable, List, Optional

import typer

from shared.config import config
from shared.logger import logger
from modules.errors import InputOpenError, InvalidPathError, MaterializeError
from modules.lines_markers import MarkerTable, DEFAULT_MARKER_TABLE
from modules.lines_classifier import LineClassifier, Marker
from modules.paths_normalizer import PathNormalizer
from modules.files_accumulator import FileAccumulator
from modules.tree_materializer import TreeMaterializer


@dataclass
class RunReport:
    root: str
    created: List[str] = field(default_factory=list)
    failed: List[str] = field(default_factory=list)
    skipped: List[str] = field(default_factory=list)
    lines: int = 0

    def summary(self) -> str:
        return (
            f"Done: {len(self.created)} file(s) created, "
            f"{len(self.failed)} failed, {len(self.skipped)} skipped"
        )


def process_lines(
    lines: Iterable[bytes],
    classifier: LineClassifier,
    normalizer: PathNormalizer,
    materializer: TreeMaterializer,
) -> RunReport:
    report = RunReport(root=materializer.root)

    with FileAccumulator(materializer) as accumulator:
        for raw in lines:
            report.lines += 1
            classified = classifier.classify(raw)

            if isinstance(classified, Marker):
                accumulator.flush()
                try:
                    path = normalizer.normalize(classified.raw_path)
                except InvalidPathError as e:
                    report.skipped.append(classified.raw_path)
                    typer.secho(str(e), fg="yellow", err=True)
                    continue
                target = materializer.prepare(path)
                accumulator.open(path, target)
            else:
                accumulator.append(classified.data)

        accumulator.flush()

    report.created = list(materializer.created)
    report.failed = list(materializer.failed)
    return report


def run(
    input_path: str,
    root: Optional[str] = None,
    markers: MarkerTable = DEFAULT_MARKER_TABLE,
) -> RunReport:
    """
    Convert the transcript at `input_path` into files under `root`
    (AI2FS_ROOT_FOLDER when not given).

    Raises InputOpenError if the input cannot be opened or read, and
    OutOfMemoryError if a file buffer cannot grow.
    """
    root = root or config["AI2FS_ROOT_FOLDER"]
    classifier = LineClassifier(markers, max_line_length=config.get_int("AI2FS_MAX_LINE_LENGTH"))
    normalizer = PathNormalizer(max_path_length=config.get_int("AI2FS_MAX_PATH_LENGTH"))
    materializer = TreeMaterializer(root)

    try:
        infile = open(input_path, "rb")
    except OSError as e:
        raise InputOpenError(input_path, e) from e

    with infile:
        try:
            materializer.ensure_root()
            typer.echo(f"Root folder '{materializer.root}' created.")
        except MaterializeError as e:
            typer.secho(str(e), fg="red", err=True)

        try:
            report = process_lines(infile, classifier, normalizer, materializer)
        except OSError as e:
            raise InputOpenError(input_path, e) from e

    logger.info(report.summary())
    return report
