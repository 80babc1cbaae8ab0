"""
Pytest configuration and fixtures for the wealthcalc test suite.

This module provides reusable snapshots and configurations for testing all
wealthcalc components. Dates are pinned so projections are reproducible.
"""

from datetime import date

import pytest

from wealthcalc.config import ProjectionConfig
from wealthcalc.snapshot import (
    Assets,
    Expenses,
    FinancialSnapshot,
    Income,
    InvestmentSettings,
    Investments,
    Liabilities,
    MilestoneGoal,
    Savings,
)


# ---------------------------------------------------------------------------
# Date Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def as_of() -> date:
    """Standard anchor date for projections."""
    return date(2025, 1, 1)


# ---------------------------------------------------------------------------
# Snapshot Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def empty_snapshot() -> FinancialSnapshot:
    """Zero-valued default snapshot."""
    return FinancialSnapshot()


@pytest.fixture
def budget_snapshot() -> FinancialSnapshot:
    """
    Reference budget.

    Gross: 4,000/month at 22% tax -> net 3,120
    Expenses: fixed 1,640 + variable 950 + debt 450 = 3,040
    """
    return FinancialSnapshot(
        income=Income(monthly_gross=4_000, tax_rate=22),
        expenses=Expenses(
            fixed={"Rent": 1_200, "Utilities": 150, "Internet": 60, "Phone": 80, "Insurance": 150},
            variable={"Groceries": 400, "Transportation": 200, "Entertainment": 200, "Shopping": 150},
            debt={"Student Loans": 350, "Credit Card": 100},
        ),
    )


@pytest.fixture
def household_snapshot() -> FinancialSnapshot:
    """
    Household with assets, liabilities, contributions and goals.

    Assets: cash 30k + home 450k + investments 200k = 680k
    Liabilities: mortgage 380k + car 25k + card 5k = 410k
    Net worth: 270k; contribution 1,500/month at 7%
    """
    return FinancialSnapshot(
        income=Income(monthly_gross=8_500, tax_rate=24),
        expenses=Expenses(
            fixed={"Mortgage": 2_200, "Childcare": 1_200},
            variable={"Groceries": 800},
            debt={"Mortgage": 2_200, "Car Loan": 400, "Credit Card": 200},
        ),
        savings=Savings(emergency=25_000, retirement=150_000, investment=50_000),
        assets=Assets(
            cash=30_000,
            properties={"Primary Home": 450_000},
            investments=Investments(stocks=120_000, bonds=60_000, other=20_000),
        ),
        liabilities=Liabilities(
            mortgages={"Primary Home": 380_000},
            loans={"Car Loan": 25_000},
            credit_cards={"Credit Card": 5_000},
        ),
        investment_settings=InvestmentSettings(
            monthly_contribution=1_500,
            risk_tolerance="moderate",
            return_rate=7,
            inflation_rate=2,
            tax_rate=24,
        ),
        milestone_goals=(
            MilestoneGoal(name="College Fund", goal=100_000, target_date="2030-12-31"),
            MilestoneGoal(name="Retirement", goal=1_500_000, target_date="2045-12-31"),
        ),
    )


# ---------------------------------------------------------------------------
# Configuration Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def projection_config() -> ProjectionConfig:
    """Default projection tables."""
    return ProjectionConfig()


@pytest.fixture
def snapshot_payload() -> dict:
    """camelCase snapshot payload as stored on disk."""
    return {
        "income": {"monthlyGross": 4000, "taxRate": 22},
        "expenses": {
            "fixed": {"Rent": 1640},
            "variable": {"Food": 950},
            "debt": {"Loan": 450},
        },
        "assets": {"cash": 5000, "investments": {"stocks": 3000, "bonds": 1000}},
        "liabilities": {"creditCards": {"Visa": 2000}},
        "investmentSettings": {
            "monthlyContribution": 400,
            "riskTolerance": "aggressive",
            "returnRate": 8,
            "accountTypes": {"traditional401k": 3000, "rothIra": 2000},
        },
        "projections": {
            "milestones": [{"name": "Emergency Fund", "goal": 15000, "targetDate": "2026-06-30"}],
        },
    }
