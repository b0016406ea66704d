"""
Sample test data for chronofilter testing.

Realistic search-box queries and their expected parses. Every expectation is
resolved against the reference date 2025-06-15 (a Sunday).
"""

from datetime import date

REFERENCE_DATE = date(2025, 6, 15)

# Natural language queries and the range the dispatcher should produce
SAMPLE_QUERIES = [
    {
        "id": "q_001",
        "text": "2025-10-15",
        "expected": {"start": "2025-10-15", "end": "2025-10-15", "kind": "specific", "confidence": 0.99}
    },
    {
        "id": "q_002",
        "text": "Appointments in October 2025",
        "expected": {"start": "2025-10-01", "end": "2025-10-31", "kind": "month", "confidence": 0.98}
    },
    {
        "id": "q_003",
        "text": "Revenue for Q4 2025",
        "expected": {"start": "2025-10-01", "end": "2025-12-31", "kind": "quarter", "confidence": 0.98}
    },
    {
        "id": "q_004",
        "text": "Patients seen last month",
        "expected": {"start": "2025-05-01", "end": "2025-05-31", "kind": "relative", "confidence": 0.98}
    },
    {
        "id": "q_005",
        "text": "Cancellations in the last 7 days",
        "expected": {"start": "2025-06-08", "end": "2025-06-15", "kind": "relative", "confidence": 0.95}
    },
    {
        "id": "q_006",
        "text": "Show all appointments for this week",
        "expected": {"start": "2025-06-15", "end": "2025-06-21", "kind": "relative", "confidence": 0.95}
    },
    {
        "id": "q_007",
        "text": "How many appointments did we have yesterday?",
        "expected": {"start": "2025-06-14", "end": "2025-06-14", "kind": "specific", "confidence": 0.98}
    },
    {
        "id": "q_008",
        "text": "Appointments tomorrow",
        "expected": {"start": "2025-06-16", "end": "2025-06-16", "kind": "specific", "confidence": 0.98}
    },
    {
        "id": "q_009",
        "text": "What's on the schedule today",
        "expected": {"start": "2025-06-15", "end": "2025-06-15", "kind": "specific", "confidence": 0.98}
    },
    {
        "id": "q_010",
        "text": "Upcoming appointments next month",
        "expected": {"start": "2025-07-01", "end": "2025-07-31", "kind": "relative", "confidence": 0.98}
    },
    {
        "id": "q_011",
        "text": "Follow-ups due in the next 30 days",
        "expected": {"start": "2025-06-15", "end": "2025-07-15", "kind": "relative", "confidence": 0.95}
    },
    {
        "id": "q_012",
        "text": "Visits in the past 14 days",
        "expected": {"start": "2025-06-01", "end": "2025-06-15", "kind": "relative", "confidence": 0.95}
    },
    {
        "id": "q_013",
        "text": "Q1 totals",
        "expected": {"start": "2025-01-01", "end": "2025-03-31", "kind": "quarter", "confidence": 0.95}
    },
    {
        "id": "q_014",
        "text": "Treatments completed this year",
        "expected": {"start": "2025-01-01", "end": "2025-12-31", "kind": "year", "confidence": 0.98}
    },
    {
        "id": "q_015",
        "text": "Consultations from last year",
        "expected": {"start": "2024-01-01", "end": "2024-12-31", "kind": "year", "confidence": 0.98}
    },
    {
        "id": "q_016",
        "text": "Appointments in 2024",
        "expected": {"start": "2024-01-01", "end": "2024-12-31", "kind": "year", "confidence": 0.95}
    },
    {
        "id": "q_017",
        "text": "Bookings for 2025-10",
        "expected": {"start": "2025-10-01", "end": "2025-10-31", "kind": "month", "confidence": 0.95}
    },
    {
        "id": "q_018",
        "text": "Show October",
        "expected": {"start": "2025-10-01", "end": "2025-10-31", "kind": "month", "confidence": 0.90}
    },
    {
        "id": "q_019",
        "text": "next October",
        "expected": {"start": "2026-10-01", "end": "2026-10-31", "kind": "month", "confidence": 0.90}
    },
    {
        "id": "q_020",
        "text": "Dec 2024",
        "expected": {"start": "2024-12-01", "end": "2024-12-31", "kind": "month", "confidence": 0.98}
    },
    {
        "id": "q_021",
        "text": "Appointments between January and March",
        "expected": {"start": "2025-01-01", "end": "2025-03-31", "kind": "range", "confidence": 0.95}
    },
    {
        "id": "q_022",
        "text": "from 2024-01-15 to 2024-02-10",
        "expected": {"start": "2024-01-15", "end": "2024-02-10", "kind": "range", "confidence": 0.95}
    },
    {
        "id": "q_023",
        "text": "show me everything",
        "expected": None
    },
    {
        "id": "q_024",
        "text": "last week",
        "expected": {"start": "2025-06-08", "end": "2025-06-14", "kind": "relative", "confidence": 0.95}
    },
    {
        "id": "q_025",
        "text": "next week",
        "expected": {"start": "2025-06-22", "end": "2025-06-28", "kind": "relative", "confidence": 0.95}
    },
    {
        "id": "q_026",
        "text": "this month",
        "expected": {"start": "2025-06-01", "end": "2025-06-30", "kind": "relative", "confidence": 0.98}
    },
    {
        "id": "q_027",
        "text": "current week",
        "expected": {"start": "2025-06-15", "end": "2025-06-21", "kind": "relative", "confidence": 0.95}
    }
]

# Full query analyses (date range, patient, count flag, direction)
SAMPLE_ANALYSES = [
    {
        "id": "a_001",
        "text": "How many appointments for John Smith last month?",
        "patient_name": "John Smith",
        "is_count_query": True,
        "direction": "past",
        "range": ("2025-05-01", "2025-05-31")
    },
    {
        "id": "a_002",
        "text": "Show Sarah's appointments next week",
        "patient_name": "Sarah",
        "is_count_query": False,
        "direction": "future",
        "range": ("2025-06-22", "2025-06-28")
    },
    {
        "id": "a_003",
        "text": "Total consultations completed in Q1",
        "patient_name": None,
        "is_count_query": True,
        "direction": "past",
        "range": ("2025-01-01", "2025-03-31")
    },
    {
        "id": "a_004",
        "text": "List scheduled visits for patient Maria Garcia",
        "patient_name": "Maria Garcia",
        "is_count_query": False,
        "direction": "future",
        "range": None
    },
    {
        "id": "a_005",
        "text": "appointments",
        "patient_name": None,
        "is_count_query": False,
        "direction": "all",
        "range": None
    }
]
