import json
import tempfile
import unittest
from datetime import date, timedelta
from pathlib import Path
from mealrotation.domain.GenerationConfig import GenerationConfig
from mealrotation.infra.Catalog_Repository import CatalogRepository
from mealrotation.infra.Plan_Repository import PlanRepository
from mealrotation.logic.planning.service import RotationService
from mealrotation.utilities.config import load_settings

START = date(2026, 10, 18)


class TestRotationService(unittest.TestCase):
    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.data_dir = Path(self._tmp.name)
        with open(self.data_dir / 'meal_options.json', 'w', encoding='utf-8') as f:
            json.dump([
                {"id": "d1", "name": "Khichdi", "category": "Dinner"},
                {"id": "d2", "name": "Fish Curry", "category": "Dinner"},
                {"id": "d3", "name": "Soup", "category": "Dinner"},
                {"id": "d4", "name": "Paneer", "category": "Dinner"},
            ], f)
        self.service = RotationService.from_settings(load_settings({
            'MEAL_PLANNER_DATA_DIR': str(self.data_dir),
            'DAYS_TO_GENERATE': '2',
        }))

    def tearDown(self):
        self._tmp.cleanup()

    def test_consecutive_runs_rotate_history(self):
        first = self.service.generate_and_save(START, seed=1)
        self.assertTrue(first.success)
        second = self.service.generate_and_save(START + timedelta(days=2), seed=2)
        self.assertTrue(second.success)
        first_dinners = {d.dinner.id for d in first.plan.days}
        second_dinners = {d.dinner.id for d in second.plan.days}
        self.assertEqual(len(first.plan.days), 2)
        self.assertFalse(first_dinners & second_dinners)

    def test_generate_does_not_save(self):
        plan = self.service.generate(START, GenerationConfig(days_to_generate=1))
        self.assertEqual(len(plan.days), 1)
        self.assertFalse((self.data_dir / 'current_plan.json').exists())

    def test_undecodable_previous_plan_is_treated_as_no_history(self):
        with open(self.data_dir / 'previous_plan.json', 'wb') as f:
            f.write(b'Caf\xe9')
        with self.assertLogs('mealrotation.infra.Plan_Repository', level='ERROR'):
            result = self.service.generate_and_save(START, seed=4)
        self.assertTrue(result.success)
        self.assertEqual(len(result.plan.days), 2)
        self.assertTrue(all(d.dinner is not None for d in result.plan.days))

    def test_unreadable_catalog_still_saves_an_empty_plan(self):
        (self.data_dir / 'meal_options.json').unlink()
        (self.data_dir / 'meal_options.json').mkdir()
        with self.assertLogs('mealrotation.infra.Catalog_Repository', level='ERROR'):
            result = self.service.generate_and_save(START, seed=4)
        self.assertTrue(result.success)
        self.assertTrue(all(d.dinner is None for d in result.plan.days))

    def test_save_failure_is_a_failed_result(self):
        blocker = self.data_dir / 'blocked'
        blocker.write_text('x', encoding='utf-8')
        service = RotationService(CatalogRepository(self.data_dir), PlanRepository(blocker))
        with self.assertLogs('mealrotation', level='ERROR'):
            result = service.generate_and_save(START, seed=0)
        self.assertFalse(result.success)
        self.assertIsNotNone(result.plan)
        self.assertEqual(result.to_dict()['error'], "Failed to save the generated plan")

if __name__ == '__main__':
    unittest.main()
