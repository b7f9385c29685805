# courier/io/saver.py
"""Data saving functionality"""
import json
import os
from typing import Dict, Any
from courier.utils import ensure_directory


class ResultSaver:
    """Handles saving of processing results"""

    def save_results(self, complete_output: Dict[str, Any], output_file: str) -> str:
        """Save processing results to file"""
        ensure_directory(os.path.dirname(output_file))
        with open(output_file, 'w') as f:
            json.dump(complete_output, f, indent=2)
        print(f"\n💾 Results saved to {output_file}")
        return output_file
