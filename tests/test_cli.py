"""
Tests for the command-line interface.
"""

import json

import pytest

import cli


class TestCli:
    def test_classify(self, capsys):
        cli.main(["classify", "5812"])
        assert capsys.readouterr().out.strip() == "5812: dining (Dining)"

    def test_recommend_json(self, capsys):
        cli.main([
            "recommend", "--mcc", "5812", "--merchant", "Olive Garden",
            "--cards", "citi-double-cash", "amex-gold", "--json",
        ])

        payload = json.loads(capsys.readouterr().out)

        assert payload["best"]["card_id"] == "amex-gold"
        assert [alt["card_id"] for alt in payload["alternatives"]] == ["citi-double-cash"]
        assert payload["upsell"]["multiplier"] > 4

    def test_recommend_text_with_empty_wallet(self, capsys):
        cli.main(["recommend", "--category", "grocery"])

        out = capsys.readouterr().out
        assert "No recommendation available" in out
        assert "Card you don't have" in out

    def test_rank_json(self, capsys):
        cli.main([
            "rank", "--category", "gas",
            "--cards", "amex-gold", "costco-anywhere", "unknown-card", "--json",
        ])

        payload = json.loads(capsys.readouterr().out)
        assert [rec["card_id"] for rec in payload] == ["costco-anywhere", "amex-gold"]

    def test_invalid_category_exits(self, capsys):
        with pytest.raises(SystemExit):
            cli.main(["recommend", "--category", "office_supplies"])
        assert "Invalid category" in capsys.readouterr().out

    def test_cards_search(self, capsys):
        cli.main(["cards", "--search", "venture", "--json"])

        payload = json.loads(capsys.readouterr().out)
        assert {card["id"] for card in payload} == {"capital-one-venture-x", "capital-one-venture"}

    def test_custom_catalog_file(self, tmp_path, capsys):
        catalog_path = tmp_path / "cards.json"
        catalog_path.write_text(json.dumps([
            {"id": "only", "name": "Only Card", "issuer": "Bank", "network": "visa",
             "annual_fee": 0, "base_reward": 3, "reward_type": "cashback", "reward_structure": []},
        ]))

        cli.main(["--catalog", str(catalog_path), "rank", "--category", "dining", "--cards", "only", "--json"])

        payload = json.loads(capsys.readouterr().out)
        assert payload[0]["estimated_reward"] == "$3.00 cash back per $100"
