"""
Tests for idiom and architecture tagging.

Tests cover:
- Idiom tags across languages and infrastructure files
- Architecture tags
- Tag ordering and independence
- Bounded matching time on large or pathological files
"""

import time

from compass.services.navigator.patterns import detect_architecture, detect_idioms


class TestDetectIdioms:
    """Tests for idiom tagging."""

    def test_tags_follow_declaration_order(self) -> None:
        """Tags come out in the table's order, not the file's."""
        content = "async function bar() { await baz(); }\nclass Foo {}\n"
        assert detect_idioms(content) == ["OOP/Classes", "Functions", "Async/Promises"]

    def test_plain_content_has_no_tags(self) -> None:
        """Content without any idiom markers yields nothing."""
        assert detect_idioms("x = 1\n") == []

    def test_es_modules_and_react(self) -> None:
        """Imports from react flag both ES6 Modules and React."""
        content = "import React, { useState } from 'react';\nexport default App;\n"
        tags = detect_idioms(content)
        assert "ES6 Modules" in tags
        assert "React" in tags

    def test_express(self) -> None:
        """require('express') and route registration."""
        tags = detect_idioms("const express = require('express');\napp.get('/', handler);\n")
        assert "Express.js" in tags

    def test_sql_is_case_insensitive(self) -> None:
        """SQL statements are recognized in any case."""
        assert "SQL/Database" in detect_idioms("SELECT id, name FROM users WHERE id = 1")
        assert "SQL/Database" in detect_idioms("db.run('select * from t')")
        assert "SQL/Database" in detect_idioms("CREATE TABLE items (id INT);")

    def test_testing_markers(self) -> None:
        """JS test blocks and pytest functions."""
        assert "Testing" in detect_idioms("describe('math', () => { it('adds', () => {}); });")
        assert "Testing" in detect_idioms("def test_adds():\n    assert 1 + 1 == 2\n")

    def test_python_frameworks(self) -> None:
        """Django, Flask and FastAPI are told apart."""
        assert "Django" in detect_idioms("from django.db import models\n")
        assert "Flask" in detect_idioms("from flask import Flask\napp = Flask(__name__)\n")
        fastapi_tags = detect_idioms("from fastapi import FastAPI\napp = FastAPI()\n")
        assert "FastAPI" in fastapi_tags
        assert "Flask" not in fastapi_tags

    def test_spring(self) -> None:
        """Spring stereotype annotations."""
        assert "Spring Framework" in detect_idioms("@RestController\npublic class Api {}\n")

    def test_go_idioms(self) -> None:
        """Goroutines and the err != nil check."""
        tags = detect_idioms("go func() {}()\nif err != nil {\n\treturn err\n}\n")
        assert "Go Concurrency" in tags
        assert "Go Error Handling" in tags

    def test_rust_idioms(self) -> None:
        """Trait impls and Result-based error handling."""
        content = (
            "impl Display for Point {}\n"
            "fn parse(s: &str) -> Result<u8, Error> {\n    let x = s.parse()?;\n}\n"
        )
        tags = detect_idioms(content)
        assert "Rust Traits" in tags
        assert "Rust Error Handling" in tags

    def test_cpp_stl(self) -> None:
        """std containers."""
        assert "C++ STL" in detect_idioms("std::vector<int> values;\n")

    def test_infrastructure_files(self) -> None:
        """Kubernetes manifests, Terraform and Docker Compose."""
        assert "Kubernetes Manifests" in detect_idioms("apiVersion: apps/v1\nkind: Deployment\n")
        assert "Infrastructure as Code" in detect_idioms('resource "aws_s3_bucket" "logs" {\n}\n')
        assert "Docker Compose" in detect_idioms("services:\n  web:\n    image: nginx\n")


class TestDetectArchitecture:
    """Tests for architecture tagging."""

    def test_express_server(self) -> None:
        """An Express bootstrap is a server with routing."""
        content = "const express = require('express');\nconst app = express();\napp.get('/', h);\n"
        tags = detect_architecture(content)
        assert tags[:2] == ["Server Architecture", "Routing Pattern"]

    def test_plain_content_has_no_tags(self) -> None:
        """Nothing architectural in a bare assignment."""
        assert detect_architecture("x = 1\n") == []

    def test_layers(self) -> None:
        """Controllers, services and repositories by class name."""
        content = "class UserController {}\nclass UserService {}\nclass UserRepository {}\n"
        tags = detect_architecture(content)
        assert "Controller Pattern" in tags
        assert "Service Layer Pattern" in tags
        assert "Repository Pattern" in tags

    def test_error_handling_and_logging(self) -> None:
        """try/catch and try/except blocks, console and logger calls."""
        js = detect_architecture("try { run(); } catch (e) { console.error(e); }")
        assert "Error Handling" in js
        assert "Logging" in js

        py = detect_architecture("try:\n    run()\nexcept ValueError:\n    logger.warning('x')\n")
        assert "Error Handling" in py
        assert "Logging" in py

    def test_react_hooks(self) -> None:
        """Hook calls."""
        assert "React Hooks Pattern" in detect_architecture("const [x, setX] = useState(0);")

    def test_configuration(self) -> None:
        """Environment lookups."""
        assert "Configuration Management" in detect_architecture("const port = process.env.PORT;")
        assert "Configuration Management" in detect_architecture("token = os.environ['TOKEN']")

    def test_middleware_and_reactive(self) -> None:
        """app.use and observables."""
        assert "Middleware Pattern" in detect_architecture("app.use(cors());")
        assert "Reactive Programming" in detect_architecture("source$.pipe(map(x => x));")

    def test_mcp_server(self) -> None:
        """Tool server shapes."""
        assert "MCP Server Pattern" in detect_architecture(
            "server.setRequestHandler(CallToolRequestSchema, handler);"
        )
        assert "MCP Server Pattern" in detect_architecture("@mcp.tool()\ndef search(): ...\n")


class TestMatchingTime:
    """Tagging stays fast on inputs that defeat backtracking regexes."""

    def test_services_block_without_image_or_build(self) -> None:
        """A long compose-like block with no image/build key is rejected quickly."""
        content = "services:\n" + "".join(f"        key{i}: value\n" for i in range(40))

        start = time.perf_counter()
        tags = detect_idioms(content)
        elapsed = time.perf_counter() - start

        assert "Docker Compose" not in tags
        assert elapsed < 2.0

    def test_services_block_with_blank_lines(self) -> None:
        """Blank lines inside the block do not hide a later build key."""
        content = "services:\n  web:\n\n    build: .\n"
        assert "Docker Compose" in detect_idioms(content)

    def test_long_run_of_blank_lines(self) -> None:
        """Thousands of empty lines neither stall nor produce tags."""
        content = "\n" * 20000

        start = time.perf_counter()
        idioms = detect_idioms(content)
        architecture = detect_architecture(content)
        elapsed = time.perf_counter() - start

        assert idioms == []
        assert architecture == []
        assert elapsed < 2.0

    def test_indented_markers_after_blank_lines(self) -> None:
        """Line-anchored markers still match indented lines after blank ones."""
        content = "\n" * 500 + "    def handler(request):\n        pass\n"
        assert "Functions" in detect_idioms(content)

    def test_python_try_except_on_separate_lines(self) -> None:
        """try/except blocks are recognized with the indentation they carry."""
        content = "def run():\n    try:\n        go()\n    except ValueError:\n        pass\n"
        assert "Error Handling" in detect_architecture(content)
