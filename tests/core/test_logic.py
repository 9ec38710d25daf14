"""Tests for core.logic module."""

import unittest
from folentail.core.logic import (
    Term, Constant, Variable, Tuple,
    Literal, Clause, KnowledgeBase, Problem, EpochCounter,
    literal_order_key, standardize, standardize_apart
)


def P(*args):
    return Tuple("P", *args)


def Q(*args):
    return Tuple("Q", *args)


class TestTerms(unittest.TestCase):
    """Test term construction and manipulation."""

    def setUp(self):
        self.x = Variable("x")
        self.y = Variable("y")
        self.A = Constant("A")
        self.B = Constant("B")

    def test_constant_and_variable_equality(self):
        """Constants and variables compare by name and never equal each other."""
        self.assertEqual(Constant("A"), self.A)
        self.assertEqual(Variable("x"), self.x)
        self.assertNotEqual(Constant("x"), self.x)
        self.assertEqual(len({self.A, Constant("A"), self.x, Variable("x")}), 2)

    def test_tuple_creation(self):
        """A string functor is turned into a constant."""
        t = Tuple("f", self.A, self.x)
        self.assertIsInstance(t, Term)
        self.assertEqual(t.functor, Constant("f"))
        self.assertEqual(t.name, "f")
        self.assertEqual(t.arity, 2)
        self.assertEqual(t.params, (self.A, self.x))
        self.assertEqual(repr(t), "f(A,x)")

    def test_tuple_rejects_non_terms(self):
        with self.assertRaises(TypeError):
            Tuple("f", "A")
        with self.assertRaises(TypeError):
            Tuple(self.x, self.A)

    def test_tuple_equality(self):
        self.assertEqual(P(self.A, self.x), P(Constant("A"), Variable("x")))
        self.assertNotEqual(P(self.A), Q(self.A))
        self.assertNotEqual(P(self.A), P(self.A, self.A))
        self.assertEqual(hash(P(self.A, self.x)), hash(P(self.A, self.x)))

    def test_variables_in_order(self):
        t = Tuple("f", self.y, Tuple("g", self.x, self.y))
        self.assertEqual(list(t.variables()), [self.y, self.x, self.y])
        self.assertEqual(list(self.A.variables()), [])

    def test_rename(self):
        t = Tuple("f", self.x, Tuple("g", self.y), self.A)
        renamed = t.rename({self.x: self.B})
        self.assertEqual(renamed, Tuple("f", self.B, Tuple("g", self.y), self.A))
        # The original term is untouched
        self.assertEqual(t, Tuple("f", self.x, Tuple("g", self.y), self.A))

    def test_copy(self):
        t = Tuple("f", self.x, self.A)
        copy = t.copy()
        self.assertEqual(copy, t)
        self.assertIsNot(copy, t)


class TestLiterals(unittest.TestCase):
    """Test literal construction."""

    def setUp(self):
        self.x = Variable("x")
        self.A = Constant("A")

    def test_literal_creation(self):
        lit = Literal(P(self.A, self.x), False)
        self.assertEqual(lit.name, "P")
        self.assertEqual(lit.arity, 2)
        self.assertEqual(lit.args, (self.A, self.x))
        self.assertFalse(lit.polarity)
        self.assertEqual(repr(lit), "~P(A,x)")
        self.assertEqual(repr(Literal(P(self.A))), "P(A)")

    def test_literal_type_checks(self):
        with self.assertRaises(TypeError):
            Literal(self.A, True)
        with self.assertRaises(TypeError):
            Literal(P(self.A), 1)

    def test_negate(self):
        lit = Literal(P(self.x))
        self.assertEqual(lit.negate(), Literal(P(self.x), False))
        self.assertEqual(lit.negate().negate(), lit)
        self.assertTrue(lit.is_complementary(lit.negate()))
        self.assertFalse(lit.is_complementary(Literal(P(self.A), False)))

    def test_equality_includes_polarity(self):
        self.assertNotEqual(Literal(P(self.A), True), Literal(P(self.A), False))
        self.assertEqual(len({Literal(P(self.A)), Literal(P(self.A))}), 1)


class TestLiteralOrder(unittest.TestCase):
    """Test the canonical literal order key."""

    def setUp(self):
        self.x = Variable("x")
        self.y = Variable("y")
        self.A = Constant("A")

    def test_negative_before_positive(self):
        self.assertLess(literal_order_key(Literal(Q(self.A), False)),
                        literal_order_key(Literal(P(self.A), True)))

    def test_name_then_arity(self):
        self.assertLess(literal_order_key(Literal(P(self.A, self.A))),
                        literal_order_key(Literal(Q(self.A))))
        self.assertLess(literal_order_key(Literal(P(self.A))),
                        literal_order_key(Literal(P(self.A, self.A))))

    def test_variables_before_constants(self):
        self.assertLess(literal_order_key(Literal(P(self.x))),
                        literal_order_key(Literal(P(self.A))))

    def test_key_is_invariant_under_renaming(self):
        self.assertEqual(literal_order_key(Literal(P(self.x, self.y, self.x))),
                         literal_order_key(Literal(P(self.y, self.x, self.y))))
        self.assertNotEqual(literal_order_key(Literal(P(self.x, self.x))),
                            literal_order_key(Literal(P(self.x, self.y))))


class TestClauses(unittest.TestCase):
    """Test clause construction and alpha-equivalence."""

    def setUp(self):
        self.x = Variable("x")
        self.y = Variable("y")
        self.u = Variable("u")
        self.v = Variable("v")
        self.A = Constant("A")

    def test_clause_creation(self):
        clause = Clause(Literal(P(self.x), False), Literal(Q(self.x)))
        self.assertEqual(clause.size, 2)
        self.assertEqual(len(clause.positive), 1)
        self.assertEqual(len(clause.negative), 1)
        self.assertFalse(clause.is_empty())
        self.assertEqual(repr(clause), "~P(x) | Q(x)")

    def test_empty_clause(self):
        empty = Clause()
        self.assertTrue(empty.is_empty())
        self.assertEqual(empty.size, 0)
        self.assertEqual(repr(empty), "$false")
        self.assertEqual(empty, Clause())

    def test_duplicate_literals_removed(self):
        clause = Clause(Literal(P(self.A)), Literal(P(self.A)))
        self.assertEqual(clause.size, 1)

    def test_clause_rejects_non_literals(self):
        with self.assertRaises(TypeError):
            Clause(P(self.A))

    def test_alpha_equivalence(self):
        c1 = Clause(Literal(P(self.x), False), Literal(Q(self.x)))
        c2 = Clause(Literal(P(self.y), False), Literal(Q(self.y)))
        self.assertEqual(c1, c2)
        self.assertEqual(hash(c1), hash(c2))

    def test_literal_order_does_not_matter(self):
        c1 = Clause(Literal(Q(self.x)), Literal(P(self.x), False))
        c2 = Clause(Literal(P(self.y), False), Literal(Q(self.y)))
        self.assertEqual(c1, c2)

    def test_variable_sharing_matters(self):
        c1 = Clause(Literal(P(self.x)), Literal(Q(self.x)))
        c2 = Clause(Literal(P(self.x)), Literal(Q(self.y)))
        self.assertNotEqual(c1, c2)

    def test_variables_differ_from_constants(self):
        self.assertNotEqual(Clause(Literal(P(self.x))), Clause(Literal(P(self.A))))

    def test_tied_literals(self):
        """Literals with equal order keys are matched by their variable links."""
        c1 = Clause(Literal(P(self.x)), Literal(P(self.y)), Literal(Q(self.y)))
        c2 = Clause(Literal(P(self.u)), Literal(P(self.v)), Literal(Q(self.u)))
        self.assertEqual(c1, c2)
        self.assertEqual(hash(c1), hash(c2))

        c3 = Clause(Literal(P(self.x, self.y)), Literal(Q(self.y)))
        c4 = Clause(Literal(Q(self.u)), Literal(P(self.v, self.u)))
        self.assertEqual(c3, c4)

    def test_long_tied_chain(self):
        """Chains of tied literals are canonical whatever order they are listed in."""
        names = [Variable(name) for name in "abcdefghi"]
        for length in (7, 8):
            lits = [Literal(P(names[i], names[i + 1])) for i in range(length)]
            forward = Clause(*lits)
            backward = Clause(*reversed(lits))
            shuffled = Clause(*(lits[1::2] + lits[::2]))
            self.assertEqual(forward, backward)
            self.assertEqual(forward, shuffled)
            self.assertEqual(hash(forward), hash(backward))
            self.assertEqual(standardize(forward).literals, standardize(backward).literals)
            self.assertEqual(repr(standardize(backward).literals[0]), "P(x0,x1)")

    def test_many_unlinked_tied_literals(self):
        c1 = Clause(*[Literal(P(Variable(f"v{i}"))) for i in range(12)])
        c2 = Clause(*[Literal(P(Variable(f"w{i}"))) for i in reversed(range(12))])
        self.assertEqual(c1, c2)
        self.assertEqual(standardize(c1).size, 12)

    def test_variables(self):
        clause = Clause(Literal(P(self.y, self.x)), Literal(Q(self.y)))
        self.assertEqual(clause.variables(), [self.y, self.x])

    def test_predicate_names(self):
        clause = Clause(Literal(P(self.x), False), Literal(Q(self.x)))
        self.assertEqual(clause.predicate_names(), {"P", "Q"})
        self.assertEqual(clause.predicate_names(True), {"Q"})
        self.assertEqual(clause.predicate_names(False), {"P"})

    def test_clauses_in_sets(self):
        clauses = {
            Clause(Literal(P(self.x))),
            Clause(Literal(P(self.y))),
            Clause(Literal(P(self.A))),
        }
        self.assertEqual(len(clauses), 2)


class TestStandardize(unittest.TestCase):
    """Test canonical renaming and standardizing apart."""

    def setUp(self):
        self.x = Variable("x")
        self.y = Variable("y")
        self.z = Variable("z")
        self.A = Constant("A")

    def test_standardize(self):
        clause = Clause(Literal(Q(self.z)), Literal(P(self.z), False))
        self.assertEqual(repr(standardize(clause)), "~P(x0) | Q(x0)")
        self.assertEqual(repr(clause.standardize()), "~P(x0) | Q(x0)")

    def test_standardize_is_idempotent(self):
        clause = Clause(Literal(Q(self.y, self.x)), Literal(P(self.x), False),
                        Literal(P(self.y)))
        once = standardize(clause)
        twice = standardize(once)
        self.assertEqual(once.literals, twice.literals)

    def test_standardize_under_renaming(self):
        clause = Clause(Literal(Q(self.y, self.x)), Literal(P(self.x), False))
        renamed = clause.rename({self.x: self.z, self.y: self.x})
        self.assertEqual(standardize(clause).literals, standardize(renamed).literals)

    def test_standardize_apart(self):
        clause = Clause(Literal(P(self.x), False), Literal(Q(self.y, self.x)))
        apart = standardize_apart(clause, 3)
        self.assertEqual(repr(apart), "~P(x0_3) | Q(x1_3,x0_3)")
        self.assertEqual(apart, clause)

    def test_standardize_apart_ground_clause(self):
        clause = Clause(Literal(P(self.A)))
        self.assertIs(standardize_apart(clause, 1), clause)


class TestEpochCounter(unittest.TestCase):

    def test_counts_up(self):
        epochs = EpochCounter()
        self.assertEqual(next(epochs), 1)
        self.assertEqual(next(epochs), 2)
        self.assertEqual(epochs.peek, 3)

    def test_following(self):
        clauses = [
            Clause(Literal(P(Variable("x0_7")))),
            Clause(Literal(P(Variable("x")))),
            Clause(Literal(P(Variable("x1_2")))),
        ]
        self.assertEqual(EpochCounter.following(clauses).peek, 8)
        self.assertEqual(EpochCounter.following([]).peek, 1)


class TestKnowledgeBase(unittest.TestCase):

    def setUp(self):
        self.x = Variable("x")
        self.A = Constant("A")
        self.unit = Clause(Literal(P(self.A)))
        self.rule = Clause(Literal(P(self.x), False), Literal(Q(self.x)))

    def test_add_deduplicates_up_to_renaming(self):
        kb = KnowledgeBase()
        self.assertTrue(kb.add(self.rule))
        self.assertFalse(kb.add(standardize_apart(self.rule, 5)))
        self.assertEqual(len(kb), 1)

    def test_update(self):
        kb = KnowledgeBase([self.rule])
        self.assertEqual(kb.update([self.unit, self.rule]), 1)
        self.assertIn(self.unit, kb)
        self.assertTrue(kb.issuperset([self.unit, self.rule]))
        self.assertFalse(kb.issuperset([Clause()]))

    def test_snapshot_orders_by_size(self):
        kb = KnowledgeBase([self.rule, self.unit])
        self.assertEqual(kb.snapshot(), [self.unit, self.rule])
        # Iteration keeps insertion order
        self.assertEqual(list(kb), [self.rule, self.unit])

    def test_copy_is_independent(self):
        kb = KnowledgeBase([self.unit])
        copy = kb.copy()
        copy.add(self.rule)
        self.assertEqual(len(kb), 1)
        self.assertEqual(len(copy), 2)

    def test_has_empty_clause(self):
        kb = KnowledgeBase([self.unit])
        self.assertFalse(kb.has_empty_clause())
        kb.add(Clause())
        self.assertTrue(kb.has_empty_clause())


class TestProblem(unittest.TestCase):

    def setUp(self):
        self.x = Variable("x")
        self.A = Constant("A")

    def test_problem_creation(self):
        clause = Clause(Literal(P(self.x), False), Literal(Q(self.x)))
        query = Literal(Q(self.A))
        problem = Problem(clause, queries=[query])
        self.assertEqual(problem.clauses, (clause,))
        self.assertEqual(problem.queries, (query,))
        self.assertEqual(problem.predicate_names(), {"P", "Q"})
        self.assertEqual(problem, Problem(clause, queries=[query]))

    def test_problem_type_checks(self):
        with self.assertRaises(TypeError):
            Problem(Literal(P(self.A)))
        with self.assertRaises(TypeError):
            Problem(queries=[P(self.A)])


if __name__ == '__main__':
    unittest.main()
