from src.college_admin.college_admin.database.connection import DBConfig, DatabaseConnection


def test_config_defaults():
    cfg = DBConfig.from_dict({"host": "db", "port": "3307"})

    assert cfg.port == 3307
    assert cfg.database == "college_admin"
    assert cfg.charset == "utf8mb4"


def test_connection_factory_is_shared_until_reset():
    DatabaseConnection.reset()
    first = DatabaseConnection.get_instance(DBConfig.from_dict({"database": "one"}))
    again = DatabaseConnection.get_instance(DBConfig.from_dict({"database": "two"}))

    assert again is first
    assert again.config.database == "one"

    DatabaseConnection.reset()
    assert DatabaseConnection.get_instance(DBConfig.from_dict({"database": "two"})).config.database == "two"
    DatabaseConnection.reset()
