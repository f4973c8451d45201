import unittest
from datetime import date, timedelta
from mealrotation.domain.MealCategory import MealCategory
from mealrotation.domain.MealOption import MealOption
from mealrotation.domain.Plan import DayPlan, WeeklyPlan
from mealrotation.logic.reporting.rotation import compute_rotation_summary

START = date(2026, 10, 18)


class TestRotationSummary(unittest.TestCase):
    def setUp(self):
        self.oats = MealOption.create("b1", "Oats", MealCategory.BREAKFAST, is_staple=True)
        self.eggs = MealOption.create("b2", "Eggs", MealCategory.BREAKFAST)
        self.poha = MealOption.create("b3", "Poha", MealCategory.BREAKFAST)
        self.dal = MealOption.create("l1", "Rice and Dal", MealCategory.LUNCH)

    def test_no_plan(self):
        summary = compute_rotation_summary(None)
        self.assertEqual(summary['days'], 0)
        self.assertEqual(summary['categories'], {})
        self.assertEqual(summary['totals']['filled'], 0)

    def test_counts_per_category(self):
        previous = WeeklyPlan.from_days([
            DayPlan(START - timedelta(days=2), self.oats, self.dal),
            DayPlan(START - timedelta(days=1), self.eggs, None),
        ])
        plan = WeeklyPlan(START, [
            DayPlan(START, self.oats, self.dal),
            DayPlan(START + timedelta(days=1), self.eggs, self.dal),
            DayPlan(START + timedelta(days=2), self.oats, None),
        ])
        summary = compute_rotation_summary(plan, previous)
        breakfast = summary['categories']['breakfast']
        self.assertEqual(breakfast['filled'], 3)
        self.assertEqual(breakfast['distinct'], 2)
        self.assertEqual(breakfast['repeated_in_plan'], 1)
        self.assertEqual(breakfast['repeats'], ['Oats'])
        self.assertEqual(breakfast['carried_over'], 1)
        self.assertEqual(breakfast['carried_over_staples'], 1)
        lunch = summary['categories']['lunch']
        self.assertEqual((lunch['filled'], lunch['empty'], lunch['carried_over']), (2, 1, 1))
        dinner = summary['categories']['dinner']
        self.assertEqual((dinner['filled'], dinner['empty']), (0, 3))
        self.assertEqual(summary['totals']['filled'], 5)
        self.assertEqual(summary['totals']['empty'], 4)

    def test_without_previous_nothing_is_carried_over(self):
        plan = WeeklyPlan(START, [DayPlan(START, self.poha)])
        summary = compute_rotation_summary(plan)
        self.assertEqual(summary['totals']['carried_over'], 0)
        self.assertEqual(summary['categories']['breakfast']['repeats'], [])

if __name__ == '__main__':
    unittest.main()
