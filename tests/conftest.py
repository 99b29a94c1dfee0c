"""Sample LeetCode payloads shared by the unit tests."""

import json

import pytest


def make_pair(question_id=1, frontend_id=1, acs=50, submitted=100, **overrides):
    pair = {
        "stat": {
            "question_id": question_id,
            "frontend_question_id": frontend_id,
            "question__title": f"Problem {frontend_id}",
            "question__title_slug": f"problem-{frontend_id}",
            "total_acs": acs,
            "total_submitted": submitted,
        },
        "difficulty": {"level": 1},
        "paid_only": False,
        "is_favor": False,
        "status": "ac",
    }
    pair.update(overrides)
    return pair


@pytest.fixture
def listing_payload():
    return {
        "category_slug": "algorithms",
        "stat_status_pairs": [
            make_pair(question_id=1, frontend_id=1),
            make_pair(question_id=2, frontend_id=2, acs=30, submitted=120, paid_only=True),
            make_pair(question_id=3, frontend_id=3, is_favor=True),
        ],
    }


@pytest.fixture
def question_payload():
    return {
        "data": {
            "question": {
                "content": "<p>Given an array of integers nums...</p>",
                "stats": json.dumps(
                    {
                        "totalAccepted": "5.1M",
                        "totalSubmission": "10.2M",
                        "totalAcceptedRaw": 5100000,
                        "totalSubmissionRaw": 10200000,
                        "acRate": "50.0%",
                    }
                ),
                "codeDefinition": json.dumps(
                    [
                        {
                            "value": "python3",
                            "text": "Python3",
                            "defaultCode": "class Solution:\n    def twoSum(self, nums, target):\n",
                        },
                        {
                            "value": "rust",
                            "text": "Rust",
                            "defaultCode": "impl Solution {\n}",
                        },
                    ]
                ),
                "sampleTestCase": "[2,7,11,15]\n9",
                "metaData": json.dumps(
                    {
                        "name": "twoSum",
                        "params": [
                            {"name": "nums", "type": "integer[]"},
                            {"name": "target", "type": "integer"},
                        ],
                        "return": {"type": "integer[]", "size": 2},
                    }
                ),
                "enableRunCode": True,
                "translatedContent": None,
            }
        }
    }
