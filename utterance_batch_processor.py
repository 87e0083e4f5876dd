"""
Utterance Batch Processor for parsing recorded transaction statements in bulk.
Handles JSON files and ZIP archives with comprehensive error handling.
"""

import json
import logging
import zipfile
import io
import os
from typing import Dict, Iterable, List, Optional, Tuple, Callable
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
import traceback

from masareef_engine.config.category_catalog import Category, Direction, DEFAULT_CATEGORIES
from masareef_engine.parsing.engine import TransactionTextParser, ParseResult
from masareef_engine.preprocessing.transcript import select_best_alternative, clean_transcript

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


class InvalidJsonStructureError(Exception):
    """Raised when JSON structure cannot be normalized to a list of utterances."""
    pass


@dataclass
class ProcessingError:
    """Details of a processing error."""
    file_name: str
    error_type: str
    error_message: str
    timestamp: str = field(default_factory=lambda: datetime.now().isoformat())


@dataclass
class UtteranceResult:
    """Parse result for one utterance in a batch file."""
    file_name: str
    utterance_id: str
    text: str
    result: ParseResult


@dataclass
class BatchStats:
    """Statistics for batch processing."""
    total_files: int = 0
    processed: int = 0
    successful: int = 0
    failed: int = 0

    # Utterance counts
    total_utterances: int = 0
    utterances_with_transactions: int = 0
    total_transactions: int = 0

    # Direction counts and totals
    income_count: int = 0
    expense_count: int = 0
    income_total: float = 0.0
    expense_total: float = 0.0

    # Timing
    start_time: Optional[datetime] = None
    end_time: Optional[datetime] = None

    @property
    def processing_time(self) -> float:
        """Calculate total processing time in seconds."""
        if self.start_time and self.end_time:
            return (self.end_time - self.start_time).total_seconds()
        return 0.0

    @property
    def success_rate(self) -> float:
        """Calculate file success rate as percentage."""
        if self.total_files == 0:
            return 0.0
        return (self.successful / self.total_files) * 100

    @property
    def extraction_rate(self) -> float:
        """Percentage of utterances that produced at least one transaction."""
        if self.total_utterances == 0:
            return 0.0
        return (self.utterances_with_transactions / self.total_utterances) * 100


@dataclass
class BatchResult:
    """Complete result of batch processing."""
    stats: BatchStats
    results: List[UtteranceResult]
    errors: List[ProcessingError]
    error_summary: Dict[str, int] = field(default_factory=dict)

    @staticmethod
    def merge_results(result1: 'BatchResult', result2: 'BatchResult') -> 'BatchResult':
        """
        Merge two BatchResult objects into a single combined result.

        Used when several uploads are processed one after another and the
        caller wants a cumulative view.

        Args:
            result1: First batch result (typically the existing cumulative result)
            result2: Second batch result (typically the new batch to add)

        Returns:
            New BatchResult with merged data
        """
        stats1, stats2 = result1.stats, result2.stats
        merged_stats = BatchStats()

        # Sum all count fields
        merged_stats.total_files = stats1.total_files + stats2.total_files
        merged_stats.processed = stats1.processed + stats2.processed
        merged_stats.successful = stats1.successful + stats2.successful
        merged_stats.failed = stats1.failed + stats2.failed
        merged_stats.total_utterances = stats1.total_utterances + stats2.total_utterances
        merged_stats.utterances_with_transactions = (
            stats1.utterances_with_transactions + stats2.utterances_with_transactions
        )
        merged_stats.total_transactions = stats1.total_transactions + stats2.total_transactions
        merged_stats.income_count = stats1.income_count + stats2.income_count
        merged_stats.expense_count = stats1.expense_count + stats2.expense_count
        merged_stats.income_total = stats1.income_total + stats2.income_total
        merged_stats.expense_total = stats1.expense_total + stats2.expense_total

        # Use earliest start time and latest end time
        if stats1.start_time and stats2.start_time:
            merged_stats.start_time = min(stats1.start_time, stats2.start_time)
        else:
            merged_stats.start_time = stats1.start_time or stats2.start_time

        if stats1.end_time and stats2.end_time:
            merged_stats.end_time = max(stats1.end_time, stats2.end_time)
        else:
            merged_stats.end_time = stats1.end_time or stats2.end_time

        # Merge error summaries
        merged_error_summary = dict(result1.error_summary)
        for error_type, count in result2.error_summary.items():
            merged_error_summary[error_type] = merged_error_summary.get(error_type, 0) + count

        return BatchResult(
            stats=merged_stats,
            results=result1.results + result2.results,
            errors=result1.errors + result2.errors,
            error_summary=merged_error_summary
        )


class UtteranceBatchProcessor:
    """Batch processor for recorded transaction statements."""

    def __init__(
        self,
        categories: Optional[Iterable[Category]] = None,
        parser: Optional[TransactionTextParser] = None
    ):
        """
        Initialize the batch processor.

        Args:
            categories: Category catalog to resolve against (defaults to DEFAULT_CATEGORIES)
            parser: Statement parser to use (a default parser if omitted)
        """
        self.categories = list(categories) if categories is not None else list(DEFAULT_CATEGORIES)
        self.parser = parser or TransactionTextParser()

        logger.info(f"Initialized batch processor: {len(self.categories)} categories")

    def process_batch(
        self,
        files: List[Tuple[str, bytes]],
        progress_callback: Optional[Callable[[int, int, str], None]] = None
    ) -> BatchResult:
        """
        Process a batch of utterance files.

        Args:
            files: List of (filename, content) tuples
            progress_callback: Optional callback(current, total, message)

        Returns:
            BatchResult with all processing results
        """
        stats = BatchStats(
            total_files=len(files),
            start_time=datetime.now()
        )

        results = []
        errors = []
        error_types = {}

        logger.info(f"Starting batch processing of {len(files)} files")

        for idx, (filename, content) in enumerate(files):
            error_type = None
            error_message = ""
            try:
                if progress_callback:
                    progress_callback(idx + 1, len(files), f"Processing: {filename}")

                logger.debug(f"Processing file {idx + 1}/{len(files)}: {filename}")

                file_results = self._process_single_file(filename=filename, content=content)

                results.extend(file_results)
                stats.processed += 1
                stats.successful += 1
                self._update_stats(stats, file_results)

            except json.JSONDecodeError as e:
                error_type = "JSON_PARSE_ERROR"
                error_message = f"Invalid JSON: {str(e)}"
                logger.error(f"JSON parse error in {filename}: {e}")

            except KeyError as e:
                error_type = "MISSING_DATA"
                error_message = f"Missing required field: {str(e)}"
                logger.error(f"Missing data in {filename}: {e}")

            except InvalidJsonStructureError as e:
                error_type = "INVALID_JSON_STRUCTURE"
                error_message = str(e)
                logger.error(f"Invalid JSON structure in {filename}: {e}")

            except ValueError as e:
                error_type = "DATA_VALIDATION_ERROR"
                error_message = str(e)
                logger.error(f"Data validation error in {filename}: {e}")

            except Exception as e:
                error_type = "PROCESSING_ERROR"
                error_message = f"{type(e).__name__}: {str(e)}"
                logger.error(f"Processing error in {filename}: {traceback.format_exc()}")

            if error_type:
                errors.append(ProcessingError(
                    file_name=filename,
                    error_type=error_type,
                    error_message=error_message
                ))
                stats.failed += 1
                stats.processed += 1
                error_types[error_type] = error_types.get(error_type, 0) + 1

        stats.end_time = datetime.now()

        logger.info(
            f"Batch processing complete: {stats.successful}/{stats.total_files} files, "
            f"{stats.total_transactions} transactions from {stats.total_utterances} utterances, "
            f"time: {stats.processing_time:.1f}s"
        )

        return BatchResult(
            stats=stats,
            results=results,
            errors=errors,
            error_summary=error_types
        )

    def _update_stats(self, stats: BatchStats, file_results: List[UtteranceResult]) -> None:
        for utterance in file_results:
            stats.total_utterances += 1
            transactions = utterance.result.transactions
            if transactions:
                stats.utterances_with_transactions += 1
            for txn in transactions:
                stats.total_transactions += 1
                if txn.direction == Direction.INCOME:
                    stats.income_count += 1
                    stats.income_total += txn.amount
                else:
                    stats.expense_count += 1
                    stats.expense_total += txn.amount

    def _process_single_file(self, filename: str, content: bytes) -> List[UtteranceResult]:
        """Process a single utterance file."""
        data = json.loads(self._decode_content(content))

        records = self._normalize_json_structure(data, filename)
        if not records:
            raise ValueError("No utterances found in file")

        self._validate_records(records)

        file_stem = Path(filename).stem
        file_results = []
        for idx, record in enumerate(records):
            text = record["text"]
            alternatives = record.get("alternatives") or []
            chosen = clean_transcript(select_best_alternative(alternatives, default=text))

            utterance_id = str(record.get("id", f"{file_stem}-{idx + 1}"))
            file_results.append(UtteranceResult(
                file_name=filename,
                utterance_id=utterance_id,
                text=chosen,
                result=self.parser.parse(chosen, self.categories)
            ))

        return file_results

    def _decode_content(self, content: bytes) -> str:
        """Decode file bytes, falling back through common encodings."""
        try:
            return content.decode("utf-8-sig")
        except UnicodeDecodeError:
            # Fallback to cp1256 for Windows-encoded Arabic
            try:
                return content.decode("cp1256")
            except UnicodeDecodeError:
                # Final fallback to latin-1 which accepts all byte values
                return content.decode("latin-1")

    def _validate_records(self, records: List[Dict]) -> None:
        """Validate utterance records."""
        for idx, record in enumerate(records):
            if not isinstance(record, dict):
                raise ValueError(f"Utterance {idx} is not an object")
            if "text" not in record:
                raise KeyError(f"text (utterance {idx})")
            if not isinstance(record["text"], str):
                raise ValueError(f"Utterance {idx} has invalid text: {record['text']!r}")

            alternatives = record.get("alternatives")
            if alternatives is not None and (
                not isinstance(alternatives, list)
                or not all(isinstance(alt, str) for alt in alternatives)
            ):
                raise ValueError(f"Utterance {idx} has invalid alternatives")

    def _normalize_json_structure(self, data, filename: str) -> List[Dict]:
        """
        Normalize different utterance file layouts to a list of records.

        Handles:
        - Dictionary with an 'utterances' key
        - Single utterance object with a 'text' key
        - Root-level list of utterance objects
        - Root-level list of plain strings

        Raises:
            InvalidJsonStructureError: If structure cannot be normalized
        """
        if isinstance(data, dict):
            if "utterances" in data:
                data = data["utterances"]
                if not isinstance(data, list):
                    raise InvalidJsonStructureError(
                        f"'utterances' in {filename} is {type(data).__name__}, expected list"
                    )
            elif "text" in data:
                logger.debug(f"{filename}: single utterance object")
                return [data]
            else:
                raise InvalidJsonStructureError(
                    f"Unrecognized JSON object in {filename}. "
                    f"Expected an 'utterances' list or a 'text' field."
                )

        if isinstance(data, list):
            if len(data) == 0:
                raise InvalidJsonStructureError(f"Empty array in JSON file: {filename}")

            records = [{"text": item} if isinstance(item, str) else item for item in data]
            logger.debug(f"{filename}: {len(records)} utterances")
            return records

        raise InvalidJsonStructureError(
            f"Unexpected JSON root type in {filename}: {type(data).__name__}. "
            f"Expected dict or list."
        )

    def load_files_from_paths(self, paths: Iterable[str]) -> List[Tuple[str, bytes]]:
        """
        Load files from disk.
        Handles both JSON files and ZIP archives.

        Args:
            paths: Paths of .json or .zip files

        Returns:
            List of (filename, content) tuples
        """
        all_files = []

        for path in paths:
            filename = os.path.basename(str(path))
            content = Path(path).read_bytes()

            if filename.lower().endswith(".zip"):
                logger.info(f"Extracting ZIP archive: {filename}")
                zip_files = self._extract_zip(content)
                all_files.extend(zip_files)
                logger.info(f"Extracted {len(zip_files)} files from {filename}")

            elif filename.lower().endswith(".json"):
                all_files.append((filename, content))

            else:
                logger.warning(f"Skipping unsupported file: {filename}")

        logger.info(f"Total files loaded: {len(all_files)}")
        return all_files

    def _extract_zip(self, content: bytes) -> List[Tuple[str, bytes]]:
        """Extract JSON files from a ZIP archive."""
        files = []

        with zipfile.ZipFile(io.BytesIO(content), "r") as zf:
            for name in zf.namelist():
                # Skip directories and non-JSON files
                if name.endswith("/"):
                    continue
                if not name.lower().endswith(".json"):
                    continue

                files.append((os.path.basename(name), zf.read(name)))

        return files

    def results_to_dataframe(self, results: List[UtteranceResult]):
        """
        Convert utterance results to a pandas DataFrame, one row per transaction.

        Utterances that produced no transaction get a single row with empty
        transaction columns so they stay visible for review.
        """
        import pandas as pd

        rows = []
        for utterance in results:
            base = {
                "File Name": utterance.file_name,
                "Utterance ID": utterance.utterance_id,
                "Text": utterance.text,
            }
            if not utterance.result.transactions:
                rows.append({**base, "Direction": None, "Amount": None, "Category": None,
                             "Category Name": None, "Note": None})
                continue

            for txn in utterance.result.transactions:
                rows.append({
                    **base,
                    "Direction": txn.direction.value,
                    "Amount": round(txn.amount, 2),
                    "Category": txn.category_id,
                    "Category Name": txn.localized_category_name,
                    "Note": txn.note,
                })

        return pd.DataFrame(rows)

    def errors_to_dataframe(self, errors: List[ProcessingError]):
        """
        Convert processing errors to a pandas DataFrame.

        Args:
            errors: List of ProcessingError objects

        Returns:
            pandas DataFrame
        """
        import pandas as pd

        rows = []
        for error in errors:
            rows.append({
                "File Name": error.file_name,
                "Error Type": error.error_type,
                "Error Message": error.error_message,
                "Timestamp": error.timestamp,
            })

        return pd.DataFrame(rows)
