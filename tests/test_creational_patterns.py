from __future__ import annotations

import copy
import re

import pytest

from patterns.abstract_factory import conceptual as af_conceptual
from patterns.abstract_factory.real_world import DollarTemplateFactory, JinjaTemplateFactory
from patterns.builder import conceptual as builder_conceptual
from patterns.builder.real_world import (
    MysqlQueryBuilder,
    PostgresQueryBuilder,
    QueryBuilderError,
    client_code as build_query,
)
from patterns.factory_method import real_world as fm_real_world
from patterns.prototype.conceptual import build_prototype
from patterns.prototype.real_world import Author, Page
from patterns.singleton import conceptual as singleton_conceptual
from patterns.singleton.real_world import Config, Logger, SingletonError


def test_abstract_factory_products_collaborate():
    factory = af_conceptual.ConcreteFactory1()
    product_b = factory.create_product_b()

    assert product_b.another_useful_function_b(factory.create_product_a()) == (
        "The result of the B1 collaborating with the (The result of the product A1.)"
    )


@pytest.mark.parametrize("factory", [JinjaTemplateFactory(), DollarTemplateFactory()])
def test_template_families_render(factory):
    page = factory.create_page_template()

    html = page.render(title="Hi", content="Body")

    assert "<h1>Hi</h1>" in html
    assert '<article class="content">Body</article>' in html


def test_jinja_family_escapes_and_dollar_family_keeps_its_syntax():
    jinja_page = JinjaTemplateFactory().create_page_template()
    dollar_page = DollarTemplateFactory().create_page_template()

    assert "&lt;b&gt;" in jinja_page.render(title="<b>", content="x")
    assert "$title" in dollar_page.get_template_string()
    assert "{{ title }}" in jinja_page.get_template_string()


def test_builder_director_and_product_reset(capsys):
    director = builder_conceptual.Director()
    builder = builder_conceptual.ConcreteBuilder1()
    director.builder = builder

    director.build_full_featured_product()
    builder.product.list_parts()
    builder.product.list_parts()

    assert capsys.readouterr().out == "Product parts: PartA1, PartB1, PartC1Product parts: "


def test_mysql_and_postgres_queries():
    assert build_query(MysqlQueryBuilder()) == (
        "SELECT name, email, password FROM users WHERE age > '18' AND age < '30' LIMIT 10, 20;"
    )
    assert build_query(PostgresQueryBuilder()).endswith("LIMIT 10 OFFSET 20;")


def test_update_and_delete_queries():
    sql = MysqlQueryBuilder().update("users", {"active": 0}).where("id", 7).get_sql()
    assert sql == "UPDATE users SET active = '0' WHERE id = '7';"
    assert MysqlQueryBuilder().delete("users").get_sql() == "DELETE FROM users;"


def test_limit_only_on_select():
    with pytest.raises(QueryBuilderError, match="LIMIT can only be added to SELECT"):
        MysqlQueryBuilder().delete("users").limit(0, 1)


def test_builder_needs_a_started_query():
    with pytest.raises(QueryBuilderError):
        MysqlQueryBuilder().where("id", 1)


def test_factory_method_posts_through_connector(capsys):
    fm_real_world.LinkedInPoster("me@example.com", "pw").post("Hi")

    out = capsys.readouterr().out.splitlines()
    assert out == [
        "Send HTTP API request to log in user me@example.com with password pw",
        "Send HTTP API requests to create a post in LinkedIn timeline.",
        "Send HTTP API request to log out user me@example.com",
    ]


def test_prototype_deep_copy_rewires_back_reference():
    prototype = build_prototype()

    shallow = copy.copy(prototype)
    deep = copy.deepcopy(prototype)

    assert shallow.components is not prototype.components
    assert shallow.components[1] is prototype.components[1]
    assert deep.components[1] is not prototype.components[1]
    assert deep.circular_reference.parent is deep
    assert prototype.circular_reference.parent is prototype


def test_page_clone():
    author = Author("Jane")
    page = Page("Tip", "Body", author)
    page.add_comment("Nice")

    clone = copy.copy(page)

    assert clone.title == "Copy of Tip"
    assert clone.comments == []
    assert clone.author is author
    assert author.pages == [page, clone]
    assert page.comments == ["Nice"]


def test_metaclass_singleton():
    assert singleton_conceptual.Singleton() is singleton_conceptual.Singleton()


def test_singleton_per_subclass_and_guards():
    assert Logger.get_instance() is Logger.get_instance()
    assert Config.get_instance() is not Logger.get_instance()

    with pytest.raises(SingletonError):
        Config()
    with pytest.raises(SingletonError):
        copy.copy(Config.get_instance())
    with pytest.raises(SingletonError):
        copy.deepcopy(Logger.get_instance())


def test_config_values_are_shared():
    Config.get_instance().set_value("login", "me")
    assert Config.get_instance().get_value("login") == "me"
    assert Config.get_instance().get_value("missing") is None


def test_logger_prefixes_date(capsys):
    Logger.log("hello")
    assert re.fullmatch(r"\d{4}-\d{2}-\d{2}: hello\n", capsys.readouterr().out)
