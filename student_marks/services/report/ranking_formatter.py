"""Ranking Formatter - Handles class ranking display formatting"""
from typing import Dict, List
from student_marks.models.student import NameAvgScore

class RankingFormatter:
    """Formats raw aggregation rows into ranking results"""

    @staticmethod
    def format_best_students(results: List[Dict]) -> List[str]:
        return [
            f"ID: {row['id']}, Name: {row['name']}, Count: {row['count']}"
            for row in results
        ]

    @staticmethod
    def format_worst_students(results: List[Dict]) -> List[str]:
        return [
            f"ID: {row['id']}, Name: {row['name']}, Total Score: {row['totalScore']}"
            for row in results
        ]

    @staticmethod
    def format_avg_scores(results: List[Dict]) -> List[NameAvgScore]:
        # mean is truncated toward zero for display
        return [NameAvgScore(name=row["name"], avg_score=int(row["avgScore"])) for row in results]
