import operator

from graphquest.linkedlist import CursorList, Queue, Stack


def traverse(lst):
    seen = []
    item = lst.first()
    while item is not None:
        seen.append(item)
        item = lst.next()
    return seen


def test_init_and_iteration():
    lst = CursorList([1, 2, 3])
    assert list(lst) == [1, 2, 3]
    assert len(lst) == 3


def test_first_next_traversal_matches_iteration():
    lst = CursorList(["a", "b", "c"])
    assert traverse(lst) == list(lst)


def test_empty_list_reads_none():
    lst = CursorList()
    assert lst.first() is None
    assert lst.next() is None
    assert lst.pop_front() is None
    assert lst.pop_back() is None
    assert lst.pop_current() is None
    assert len(lst) == 0


def test_push_front_and_back():
    lst = CursorList()
    lst.push_back(2)
    lst.push_front(1)
    lst.push_back(3)
    assert list(lst) == [1, 2, 3]


def test_push_front_keeps_cursor_on_same_element():
    lst = CursorList([1, 2])
    lst.first()
    lst.push_front(0)
    assert lst.next() == 2


def test_push_current_inserts_after_cursor():
    lst = CursorList([1, 3])
    lst.first()
    lst.push_current(2)
    assert list(lst) == [1, 2, 3]
    assert lst.next() == 2


def test_push_current_without_cursor_does_nothing():
    lst = CursorList([1])
    lst.push_current(2)
    assert list(lst) == [1]


def test_pop_front_and_back():
    lst = CursorList([1, 2, 3])
    assert lst.pop_front() == 1
    assert lst.pop_back() == 3
    assert list(lst) == [2]


def test_pop_current_middle_moves_to_successor():
    lst = CursorList([1, 2, 3, 4])
    lst.first()
    lst.next()
    assert lst.pop_current() == 2
    assert list(lst) == [1, 3, 4]
    assert lst.next() == 4


def test_pop_current_head():
    lst = CursorList([1, 2])
    lst.first()
    assert lst.pop_current() == 1
    assert list(lst) == [2]


def test_pop_current_tail_then_push_back():
    lst = CursorList([1, 2])
    lst.first()
    lst.next()
    assert lst.pop_current() == 2
    assert lst.pop_current() is None
    lst.push_back(5)
    assert list(lst) == [1, 5]


def test_sorted_insert_orders_elements():
    lst = CursorList()
    for value in [5, 1, 3, 2, 4]:
        lst.sorted_insert(value, operator.lt)
    assert list(lst) == sorted([5, 1, 3, 2, 4])


def test_sorted_insert_is_stable_for_equal_keys():
    lst = CursorList()

    def by_first(a, b):
        return a[0] < b[0]

    for pair in [(1, "a"), (0, "z"), (1, "b"), (1, "c")]:
        lst.sorted_insert(pair, by_first)
    assert list(lst) == [(0, "z"), (1, "a"), (1, "b"), (1, "c")]


def test_clean_empties_list():
    lst = CursorList([1, 2])
    lst.first()
    lst.clean()
    assert len(lst) == 0
    assert lst.first() is None
    assert lst.next() is None


def test_stack_is_lifo():
    stack = Stack()
    for value in [1, 2, 3]:
        stack.push(value)
    assert stack.top() == 3
    assert [stack.pop(), stack.pop(), stack.pop()] == [3, 2, 1]
    assert stack.pop() is None
    assert stack.top() is None


def test_stack_len_and_clean():
    stack = Stack()
    stack.push("x")
    stack.push("y")
    assert len(stack) == 2
    stack.clean()
    assert len(stack) == 0


def test_queue_is_fifo():
    queue = Queue()
    for value in [1, 2, 3]:
        queue.insert(value)
    assert queue.front() == 1
    assert [queue.remove(), queue.remove(), queue.remove()] == [1, 2, 3]
    assert queue.remove() is None
    assert queue.front() is None


def test_queue_len_and_clean():
    queue = Queue()
    queue.insert("x")
    assert len(queue) == 1
    queue.clean()
    assert len(queue) == 0