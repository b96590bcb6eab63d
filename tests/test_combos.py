import unittest

from movie_ticket_purchase import BaseCombo, BeverageCombo, DessertCombo, EdibleProduct


class ComboTests(unittest.TestCase):
    def test_product_describes_itself(self) -> None:
        self.assertEqual(EdibleProduct("Canguil").get_description(), "Canguil")

    def test_nested_combos_keep_their_own_extras(self) -> None:
        inner = BeverageCombo(EdibleProduct("Canguil"), EdibleProduct("Bebida"))
        outer = DessertCombo(inner, EdibleProduct("Postre"))

        self.assertEqual(inner.get_description(), "Canguil con: Bebida")
        self.assertEqual(outer.get_description(), "Canguil con: Bebida con: Postre")
        self.assertEqual(len(inner.extras), 1)
        self.assertEqual(len(outer.extras), 1)

    def test_extras_are_listed_in_insertion_order(self) -> None:
        combo = BaseCombo(EdibleProduct("Hot-dog"))
        combo.add_extra(EdibleProduct("Bebida"))
        combo.add_extra(EdibleProduct("Postre"))
        self.assertEqual(combo.get_description(), "Hot-dog con: Bebida, Postre")

    def test_combo_without_extras_keeps_separator(self) -> None:
        combo = BaseCombo(EdibleProduct("Canguil"))
        self.assertEqual(combo.get_description(), "Canguil con: ")

    def test_adding_extra_to_outer_leaves_inner_untouched(self) -> None:
        inner = BeverageCombo(EdibleProduct("Canguil"), EdibleProduct("Bebida"))
        outer = DessertCombo(inner, EdibleProduct("Postre"))
        outer.add_extra(EdibleProduct("Nachos"))

        self.assertEqual(inner.get_description(), "Canguil con: Bebida")
        self.assertEqual(outer.get_description(), "Canguil con: Bebida con: Postre, Nachos")


if __name__ == "__main__":
    unittest.main()
