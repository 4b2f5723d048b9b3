from __future__ import annotations

import httpx
import pytest

from adapters.http_client import build_client
from core.config import AppSettings, use_settings
from core.resources_loader import data_dir
from patterns.chain_of_responsibility.real_world import (
    RequestLimitExceeded,
    RoleCheckMiddleware,
    Server,
    ThrottlingMiddleware,
    UserExistsMiddleware,
    build_server,
    play,
)
from patterns.command.real_world import (
    GenrePageScrapingCommand,
    GenresScrapingCommand,
    Queue,
    WebScrapingCommand,
)
from patterns.interpreter.real_world import AndExp, Context, OrExp, UndefinedVariableError, VariableExp
from patterns.iterator import conceptual as iterator_conceptual
from patterns.iterator.real_world import CsvIterator, CsvReadError
from patterns.mediator import real_world as mediator
from patterns.memento.real_world import AdvancedEditorHistory, EditorHistory, TextEditor
from patterns.observer import conceptual as observer_conceptual
from patterns.observer import real_world as observer
from patterns.state.real_world import Invoice, InvalidStateTransitionError
from patterns.strategy.real_world import (
    CreditCardPayment,
    OrderController,
    UnknownPaymentMethodError,
)
from patterns.template_method.real_world import Facebook, Twitter, simulate_network_latency
from patterns.visitor.real_world import Employee, SalaryReport, build_company, format_salary, format_total


class FakeClock:
    def __init__(self) -> None:
        self.now = 1000.0

    def __call__(self) -> float:
        return self.now


def _server_with_clock(clock: FakeClock, limit: int = 2) -> Server:
    server = Server()
    server.register("admin@example.com", "admin_pass")
    server.register("user@example.com", "user_pass")
    middleware = ThrottlingMiddleware(limit, clock=clock)
    middleware.link_with(UserExistsMiddleware(server)).link_with(RoleCheckMiddleware())
    server.set_middleware(middleware)
    return server


# --- Chain of Responsibility ---


def test_chain_rejects_unknown_email_and_wrong_password(capsys):
    server = build_server(request_per_minute=10)

    assert server.log_in("nobody@example.com", "x") is False
    assert server.log_in("user@example.com", "nope") is False
    assert server.log_in("user@example.com", "user_pass") is True

    out = capsys.readouterr().out
    assert "UserExistsMiddleware: This email is not registered!" in out
    assert "UserExistsMiddleware: Wrong password!" in out
    assert "RoleCheckMiddleware: Hello, user!" in out


def test_throttling_window_resets_after_a_minute(capsys):
    clock = FakeClock()
    server = _server_with_clock(clock)

    server.log_in("admin@example.com", "admin_pass")
    server.log_in("admin@example.com", "admin_pass")
    with pytest.raises(RequestLimitExceeded):
        server.log_in("admin@example.com", "admin_pass")
    assert "ThrottlingMiddleware: Request limit exceeded!" in capsys.readouterr().out

    clock.now += 61
    assert server.log_in("admin@example.com", "admin_pass") is True


def test_play_stops_at_first_success():
    server = build_server(request_per_minute=10)
    attempts = iter(
        [
            ("user@example.com", "bad"),
            ("admin@example.com", "admin_pass"),
            ("user@example.com", "user_pass"),
        ]
    )

    assert play(server, attempts) is True
    assert next(attempts) == ("user@example.com", "user_pass")


def test_build_server_reads_throttle_from_settings(monkeypatch):
    monkeypatch.setenv("PATTERN_CATALOG_THROTTLE_REQUESTS_PER_MINUTE", "1")
    server = build_server()

    server.log_in("admin@example.com", "admin_pass")
    with pytest.raises(RequestLimitExceeded):
        server.log_in("admin@example.com", "admin_pass")


# --- Command ---


def test_queue_scrapes_the_offline_site(tmp_path, capsys):
    queue = Queue(tmp_path / "commands.sqlite", client=build_client())
    queue.add(GenresScrapingCommand())
    queue.work()

    (rows,) = queue.db.execute("SELECT COUNT(*) FROM commands").fetchone()
    assert rows == 9
    assert queue.is_empty()
    out = capsys.readouterr().out
    assert out.count("MovieScrapingCommand: Parsed movie") == 5
    assert "MovieScrapingCommand: Parsed movie Weekend Plans." in out
    queue.close()


def test_queue_resumes_pending_commands(tmp_path):
    path = tmp_path / "commands.sqlite"
    first = Queue(path, client=build_client())
    first.add(GenrePageScrapingCommand("https://movies.example/search/title?genres=drama"))
    first.close()

    second = Queue(path, client=build_client())
    assert not second.is_empty()
    pending = second.get_command()
    assert isinstance(pending, GenrePageScrapingCommand)
    assert pending.get_url() == "https://movies.example/search/title?genres=drama&page=1"

    second.work()
    assert second.is_empty()
    second.close()


def test_commands_serialize_to_json():
    command = GenrePageScrapingCommand("https://movies.example/search/title?genres=comedy", page=2)

    data = command.to_json()
    restored = WebScrapingCommand.from_json(data)

    assert data == {"kind": "genre_page", "url": "https://movies.example/search/title?genres=comedy", "page": 2}
    assert isinstance(restored, GenrePageScrapingCommand)
    assert restored.page == 2


def test_shared_queue_lives_in_data_dir():
    queue = Queue.get()

    assert queue is Queue.get()
    assert queue.path == data_dir() / "commands.sqlite"


def test_shared_queue_follows_http_settings():
    with use_settings(AppSettings(offline_http=True)):
        offline = Queue.get()
        assert isinstance(offline.client._transport, httpx.MockTransport)

    with use_settings(AppSettings(offline_http=False)):
        online = Queue.get()
        assert online is not offline
        assert not isinstance(online.client._transport, httpx.MockTransport)

    with use_settings(AppSettings(offline_http=False, user_agent="other/1.0")):
        assert Queue.get() is not online
        assert Queue.get().client.headers["User-Agent"] == "other/1.0"


# --- Interpreter ---


def test_interpreter_evaluates_expression_tree():
    context = Context()
    a, b, c = VariableExp("A"), VariableExp("B"), VariableExp("C")
    context.assign(a, True)
    context.assign(b, False)
    context.assign(c, True)

    exp = AndExp(a, OrExp(b, c))

    assert exp.interpret(context) is True
    assert str(exp) == "(A ∧ (B ∨ C))"


def test_interpreter_undefined_variable():
    context = Context()
    with pytest.raises(UndefinedVariableError) as excinfo:
        VariableExp("D").interpret(context)

    assert str(excinfo.value) == "No exist variable: D"
    assert isinstance(excinfo.value, KeyError)


# --- Iterator ---


def test_words_collection_reverse_iterator():
    collection = iterator_conceptual.WordsCollection(["a", "b", "c"])

    assert list(collection) == ["a", "b", "c"]
    assert list(collection.get_reverse_iterator()) == ["c", "b", "a"]


def test_csv_iterator_reads_lazily_and_rewinds(tmp_path):
    path = tmp_path / "rows.csv"
    path.write_text("a,1\nb,2\nc,3\n", encoding="utf-8")

    rows = CsvIterator(path)
    assert [(rows.key(), row) for row in rows] == [(1, ["a", "1"]), (2, ["b", "2"]), (3, ["c", "3"])]
    assert rows.closed

    first = next(iter(rows))
    assert first == ["a", "1"]
    assert rows.key() == 1
    rows.close()


def test_csv_iterator_custom_delimiter(tmp_path):
    path = tmp_path / "rows.tsv"
    path.write_text("x\ty\n", encoding="utf-8")

    assert list(CsvIterator(path, delimiter="\t")) == [["x", "y"]]


def test_csv_iterator_missing_file(tmp_path):
    missing = tmp_path / "missing.csv"
    with pytest.raises(CsvReadError, match="cannot be read"):
        CsvIterator(missing)


# --- Mediator ---


def test_user_deletes_itself_through_the_dispatcher(tmp_path, capsys):
    dispatcher = mediator.reset_events()
    repository = mediator.UserRepository()
    log_file = tmp_path / "log.txt"
    dispatcher.attach(mediator.Logger(log_file), "*")

    user = repository.create_user({"name": "Jane"})
    assert user.attributes["id"] in repository.users

    user.delete()

    assert repository.users == {}
    log = log_file.read_text(encoding="utf-8")
    assert "'users:created'" in log
    assert "'users:deleted'" in log
    assert "EventDispatcher: Broadcasting the 'users:deleted' event." in capsys.readouterr().out


def test_dispatcher_detach_and_specific_events(capsys):
    dispatcher = mediator.EventDispatcher()
    notifier = mediator.OnboardingNotification("admin@example.com")
    dispatcher.attach(notifier, "users:created")

    dispatcher.trigger("users:created", object())
    dispatcher.trigger("users:deleted", object())
    dispatcher.detach(notifier, "users:created")
    dispatcher.trigger("users:created", object())

    assert capsys.readouterr().out.count("OnboardingNotification: The notification has been emailed!") == 1


# --- Memento ---


def test_history_undo_and_redo(capsys):
    editor = TextEditor()
    history = EditorHistory(editor, max_history_size=10)
    history.save_state()
    editor.type("Hello")
    history.save_state()
    editor.type(" World")
    history.save_state()

    assert history.undo() is True
    assert editor.content == "Hello"
    assert history.redo() is True
    assert editor.content == "Hello World"
    assert history.redo() is False


def test_saving_after_undo_drops_redo_branch():
    editor = TextEditor()
    history = EditorHistory(editor, max_history_size=10)
    history.save_state()
    editor.type("one")
    history.save_state()
    history.undo()
    editor.type("two")
    history.save_state()

    assert len(history.history) == 2
    assert history.history[-1].content == "two"
    assert history.redo() is False


def test_history_is_capped():
    editor = TextEditor()
    history = EditorHistory(editor, max_history_size=2)
    for text in ("a", "b", "c"):
        editor.type(text)
        history.save_state()

    assert [snapshot.content for snapshot in history.history] == ["ab", "abc"]
    assert history.current_index == 1
    assert history.undo() is True
    assert history.undo() is False


def test_history_size_from_settings_and_validation(monkeypatch):
    monkeypatch.setenv("PATTERN_CATALOG_HISTORY_MAX_SIZE", "3")
    assert EditorHistory(TextEditor()).max_history_size == 3

    with pytest.raises(ValueError):
        EditorHistory(TextEditor(), max_history_size=0)


def test_named_snapshots_and_editor_edits():
    editor = TextEditor()
    history = AdvancedEditorHistory(editor, max_history_size=5)
    editor.type("Hello World")
    editor.apply_formatting({"bold": True})
    history.save_named_snapshot("bold")

    editor.delete(6)
    editor.set_cursor_position(99)
    assert editor.content == "Hello"
    assert editor.cursor_position == 5

    assert history.restore_named_snapshot("bold") is True
    assert editor.content == "Hello World"
    assert editor.formatting["bold"] is True
    assert history.restore_named_snapshot("missing") is False


def test_snapshot_formatting_is_not_shared_with_editor():
    editor = TextEditor()
    snapshot = editor.create_memento()
    editor.apply_formatting({"italic": True})

    assert snapshot.formatting["italic"] is False


# --- Observer ---


def test_conceptual_observers_react_to_state():
    subject = observer_conceptual.ConcreteSubject()
    a = observer_conceptual.ConcreteObserverA()
    b = observer_conceptual.ConcreteObserverB()
    subject.attach(a)
    subject.attach(b)

    subject.some_business_logic(state=0)
    subject.some_business_logic(state=5)
    subject.detach(a)
    subject.some_business_logic(state=1)

    assert a.reactions == 1
    assert b.reactions == 2


def test_repository_notifies_by_event(tmp_path, capsys):
    repository = observer.UserRepository()
    log_file = tmp_path / "log.txt"
    repository.attach(observer.Logger(log_file), "*")
    repository.attach(observer.OnboardingNotification("admin@example.com"), "users:created")

    user = repository.create_user({"name": "John"})
    repository.update_user(user, {"name": "Johnny"})
    repository.delete_user(user)

    out = capsys.readouterr().out
    assert out.count("OnboardingNotification: The notification has been emailed!") == 1
    assert log_file.read_text(encoding="utf-8").count("\n") == 3
    assert '"name": "Johnny"' in log_file.read_text(encoding="utf-8")


def test_update_unknown_user_returns_none():
    repository = observer.UserRepository()
    stranger = observer.User()
    stranger.update({"id": "nope"})

    assert repository.update_user(stranger, {"name": "x"}) is None


# --- State ---


def test_invoice_happy_path():
    invoice = Invoice(1, 10.0)
    assert invoice.state_name == "draft"

    invoice.finalize()
    invoice.cancel()
    invoice.pay()

    assert invoice.state_name == "paid"
    assert invoice.info()["state"] == "paid"


def test_invoice_refuses_invalid_transitions():
    invoice = Invoice(2, 10.0)
    with pytest.raises(InvalidStateTransitionError, match="Cannot pay invoice in draft state"):
        invoice.pay()

    invoice.finalize()
    invoice.void()
    with pytest.raises(InvalidStateTransitionError, match="Cannot finalize invoice in void state"):
        invoice.finalize()


# --- Strategy ---


def _controller_with_order() -> tuple[OrderController, int]:
    controller = OrderController()
    order = controller.post("/orders", {"email": "me@example.com", "product": "Food", "total": 9.95})
    assert order is not None
    return controller, order.id


def test_credit_card_payment_completes_order(capsys):
    controller, order_id = _controller_with_order()
    order = controller.store.get(order_id)
    key = CreditCardPayment.payment_key(order)

    controller.get(f"/order/{order_id}/payment/cc/return?key={key}&success=true&total=9.95")

    assert order.status == "completed"
    assert "Controller: Thanks for your order!" in capsys.readouterr().out


@pytest.mark.parametrize(
    "query, message",
    [
        ("key=forged&success=true&total=9.95", "Payment key is wrong."),
        ("key={key}&success=false&total=9.95", "Payment failed."),
        ("key={key}&success=true&total=1", "Payment amount is wrong."),
    ],
)
def test_credit_card_payment_errors(capsys, query, message):
    controller, order_id = _controller_with_order()
    order = controller.store.get(order_id)
    key = CreditCardPayment.payment_key(order)

    controller.get(f"/order/{order_id}/payment/cc/return?{query.format(key=key)}")

    assert order.status == "new"
    assert f"Controller: got an exception ({message})" in capsys.readouterr().out


def test_payment_form_and_unknown_method(capsys):
    controller, order_id = _controller_with_order()

    controller.get(f"/order/{order_id}/payment/paypal")
    assert 'action="https://paypal.com/payment"' in capsys.readouterr().out

    with pytest.raises(UnknownPaymentMethodError, match="Unknown Payment Method: bitcoin"):
        controller.get(f"/order/{order_id}/payment/bitcoin")


def test_controller_404s(capsys):
    controller, _ = _controller_with_order()

    assert controller.post("/carts", {}) is None
    controller.get("/order/42/payment/cc")
    controller.get("/nowhere")

    assert capsys.readouterr().out.count("Controller: 404 page") == 3


# --- Template Method ---


def test_post_masks_password(capsys):
    assert Facebook("john", "secret").post("hi") is True

    out = capsys.readouterr().out
    assert "Password: ******" in out
    assert "secret" not in out
    assert "Facebook: 'john' has posted 'hi'." in out
    assert out.rstrip().endswith("Facebook: 'john' has been logged out.")


def test_latency_dots(capsys, monkeypatch):
    sleeps: list[float] = []
    monkeypatch.setattr("patterns.template_method.real_world.time.sleep", sleeps.append)

    simulate_network_latency(0.5)

    assert capsys.readouterr().out == "....."
    assert sleeps == [0.1] * 5


def test_twitter_posts(capsys):
    Twitter("jane", "pw").post("tweet")
    assert "Twitter: 'jane' has posted 'tweet'." in capsys.readouterr().out


# --- Visitor ---


def test_salary_report():
    company = build_company()
    report = company.accept(SalaryReport())

    assert company.get_cost() == 550000
    assert report.startswith("SuperStarDevelopment (USD 550,000.00)")
    assert "Mobile Development (USD 351,000.00)" in report
    assert "Tech Support (USD 199,000.00)" in report


def test_employee_line_and_formats():
    assert Employee("Ann", "QA", 30000).accept(SalaryReport()) == "  $30,000.00 Ann (QA)\n"
    assert format_total(1234) == "USD 1,234.00"
    assert format_salary(100000) == "$100,000.00"
