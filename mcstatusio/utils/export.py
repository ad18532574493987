"""
Status export utilities
"""

import json
import csv
import logging
from typing import Optional, Iterable
from pathlib import Path
from dataclasses import asdict
from datetime import datetime, timezone

from ..core.exceptions import ExportError
from ..parsers.status_parser import StatusSummary

logger = logging.getLogger(__name__)

CSV_COLUMNS = [
    'edition', 'host', 'port', 'online', 'ip_address', 'eula_blocked', 'version',
    'protocol', 'players_online', 'players_max', 'motd', 'software', 'gamemode',
    'retrieved_at', 'expires_at', 'players', 'plugins', 'mods'
]

def detect_format(filename: str) -> str:
    """Pick an export format from the file extension, defaulting to JSON"""
    ext = Path(filename).suffix.lower()
    if ext == '.csv':
        return 'csv'
    return 'json'

class StatusExporter:
    """Export status summaries to JSON or CSV"""
    
    def export(self, summaries: Iterable[StatusSummary], filename: str,
               export_format: Optional[str] = None) -> Path:
        export_format = export_format or detect_format(filename)
        if export_format == 'json':
            return self.export_json(summaries, filename)
        if export_format == 'csv':
            return self.export_csv(summaries, filename)
        raise ExportError(f"Unsupported export format: {export_format}")
    
    def export_json(self, summaries: Iterable[StatusSummary], filename: str) -> Path:
        """Export summaries to JSON with an export_info header"""
        data = [asdict(summary) for summary in summaries]
        export_data = {
            'export_info': {
                'timestamp': datetime.now(timezone.utc).isoformat(),
                'format': 'json',
                'total_records': len(data)
            },
            'servers': data
        }
        
        try:
            with open(filename, 'w', encoding='utf-8') as f:
                json.dump(export_data, f, indent=2, ensure_ascii=False, default=str)
        except OSError as e:
            raise ExportError(f"JSON export failed: {e}") from e
        
        logger.info(f"Exported {len(data)} servers to JSON: {filename}")
        return Path(filename)
    
    def export_csv(self, summaries: Iterable[StatusSummary], filename: str) -> Path:
        """Export summaries to CSV, lists and maps joined into single cells"""
        rows = [self._flatten(summary) for summary in summaries]
        
        try:
            with open(filename, 'w', newline='', encoding='utf-8') as f:
                writer = csv.DictWriter(f, fieldnames=CSV_COLUMNS)
                writer.writeheader()
                writer.writerows(rows)
        except OSError as e:
            raise ExportError(f"CSV export failed: {e}") from e
        
        logger.info(f"Exported {len(rows)} servers to CSV: {filename}")
        return Path(filename)
    
    @staticmethod
    def _flatten(summary: StatusSummary) -> dict:
        row = asdict(summary)
        row['players'] = ';'.join(summary.players)
        row['plugins'] = ';'.join(f"{name}={version}" for name, version in summary.plugins.items())
        row['mods'] = ';'.join(f"{name}={version}" for name, version in summary.mods.items())
        return {col: ('' if row.get(col) is None else row[col]) for col in CSV_COLUMNS}
