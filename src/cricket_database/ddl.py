"""Static DDL for the cricket statistics schema.

The script is sent to the database verbatim, one statement at a time inside a
single transaction. Every statement is conditioned on absence so the script
can be applied repeatedly.
"""

from typing import Tuple


SCHEMA_TABLES: Tuple[str, ...] = (
    "teams",
    "players",
    "venues",
    "events",
    "matches",
    "match_dates",
    "match_teams",
    "match_team_players",
    "officials",
    "match_officials",
    "innings",
    "overs",
    "deliveries",
    "delivery_extras",
    "wickets",
    "wicket_fielders",
    "powerplays",
)

SCHEMA_INDEXES: Tuple[str, ...] = (
    "idx_matches_event",
    "idx_innings_match",
    "idx_overs_innings",
    "idx_deliveries_over",
    "idx_deliveries_batter",
    "idx_deliveries_bowler",
    "idx_wickets_delivery",
    "idx_powerplays_innings",
)


CRICKET_SCHEMA_SQL = """
CREATE TABLE IF NOT EXISTS teams (
    id BIGSERIAL PRIMARY KEY,
    name VARCHAR(100) UNIQUE NOT NULL,
    team_type VARCHAR(50)
);

CREATE TABLE IF NOT EXISTS players (
    id BIGSERIAL PRIMARY KEY,
    registry_id VARCHAR(20) UNIQUE,
    full_name VARCHAR(150) NOT NULL
);

CREATE TABLE IF NOT EXISTS venues (
    id BIGSERIAL PRIMARY KEY,
    name VARCHAR(200) NOT NULL,
    city VARCHAR(100),
    UNIQUE(name, city)
);

CREATE TABLE IF NOT EXISTS events (
    id BIGSERIAL PRIMARY KEY,
    name VARCHAR(200) NOT NULL,
    season VARCHAR(20),
    event_group VARCHAR(20),
    UNIQUE(name, season, event_group)
);

CREATE TABLE IF NOT EXISTS matches (
    id BIGSERIAL PRIMARY KEY,
    event_id BIGINT REFERENCES events(id),
    venue_id BIGINT REFERENCES venues(id),
    match_number INT,
    match_type VARCHAR(20),
    match_type_number INT,
    gender VARCHAR(20),
    overs_limit INT NULL,
    balls_per_over INT,
    toss_winner_team_id BIGINT REFERENCES teams(id),
    toss_decision VARCHAR(10),
    winner_team_id BIGINT REFERENCES teams(id),
    win_type VARCHAR(20),
    win_margin INT,
    outcome_method VARCHAR(20),
    player_of_match_id BIGINT REFERENCES players(id),
    UNIQUE(event_id, match_number, venue_id)
);

CREATE TABLE IF NOT EXISTS match_dates (
    match_id BIGINT REFERENCES matches(id) ON DELETE CASCADE,
    match_date DATE,
    PRIMARY KEY (match_id, match_date)
);

CREATE TABLE IF NOT EXISTS match_teams (
    match_id BIGINT REFERENCES matches(id) ON DELETE CASCADE,
    team_id BIGINT REFERENCES teams(id),
    PRIMARY KEY (match_id, team_id)
);

CREATE TABLE IF NOT EXISTS match_team_players (
    match_id BIGINT REFERENCES matches(id) ON DELETE CASCADE,
    team_id BIGINT REFERENCES teams(id),
    player_id BIGINT REFERENCES players(id),
    PRIMARY KEY (match_id, player_id)
);

CREATE TABLE IF NOT EXISTS officials (
    id BIGSERIAL PRIMARY KEY,
    player_id BIGINT REFERENCES players(id) UNIQUE
);

CREATE TABLE IF NOT EXISTS match_officials (
    match_id BIGINT REFERENCES matches(id) ON DELETE CASCADE,
    official_id BIGINT REFERENCES officials(id),
    role VARCHAR(30),
    PRIMARY KEY (match_id, official_id, role)
);

CREATE TABLE IF NOT EXISTS innings (
    id BIGSERIAL PRIMARY KEY,
    match_id BIGINT REFERENCES matches(id) ON DELETE CASCADE,
    team_id BIGINT REFERENCES teams(id),
    innings_no INT,
    penalty_runs_pre INT DEFAULT 0,
    penalty_runs_post INT DEFAULT 0,
    UNIQUE(match_id, innings_no)
);

CREATE TABLE IF NOT EXISTS overs (
    id BIGSERIAL PRIMARY KEY,
    innings_id BIGINT REFERENCES innings(id) ON DELETE CASCADE,
    over_no INT,
    UNIQUE(innings_id, over_no)
);

CREATE TABLE IF NOT EXISTS deliveries (
    id BIGSERIAL PRIMARY KEY,
    over_id BIGINT REFERENCES overs(id) ON DELETE CASCADE,
    ball_no INT,
    batter_id BIGINT REFERENCES players(id),
    bowler_id BIGINT REFERENCES players(id),
    non_striker_id BIGINT REFERENCES players(id),
    runs_batter INT DEFAULT 0,
    runs_extras INT DEFAULT 0,
    runs_total INT DEFAULT 0,
    CHECK (runs_total >= 0),
    UNIQUE(over_id, ball_no)
);

CREATE TABLE IF NOT EXISTS delivery_extras (
    delivery_id BIGINT PRIMARY KEY REFERENCES deliveries(id) ON DELETE CASCADE,
    wides INT DEFAULT 0,
    noballs INT DEFAULT 0,
    byes INT DEFAULT 0,
    legbyes INT DEFAULT 0
);

CREATE TABLE IF NOT EXISTS wickets (
    id BIGSERIAL PRIMARY KEY,
    delivery_id BIGINT REFERENCES deliveries(id) ON DELETE CASCADE,
    player_out_id BIGINT REFERENCES players(id),
    kind VARCHAR(50)
);

CREATE TABLE IF NOT EXISTS wicket_fielders (
    wicket_id BIGINT REFERENCES wickets(id) ON DELETE CASCADE,
    fielder_id BIGINT REFERENCES players(id),
    PRIMARY KEY (wicket_id, fielder_id)
);

CREATE TABLE IF NOT EXISTS powerplays (
    id BIGSERIAL PRIMARY KEY,
    innings_id BIGINT REFERENCES innings(id) ON DELETE CASCADE,
    start_over NUMERIC(4,1),
    end_over NUMERIC(4,1),
    type VARCHAR(20)
);

-- Indexes
CREATE INDEX IF NOT EXISTS idx_matches_event ON matches(event_id);
CREATE INDEX IF NOT EXISTS idx_innings_match ON innings(match_id);
CREATE INDEX IF NOT EXISTS idx_overs_innings ON overs(innings_id);
CREATE INDEX IF NOT EXISTS idx_deliveries_over ON deliveries(over_id);
CREATE INDEX IF NOT EXISTS idx_deliveries_batter ON deliveries(batter_id);
CREATE INDEX IF NOT EXISTS idx_deliveries_bowler ON deliveries(bowler_id);
CREATE INDEX IF NOT EXISTS idx_wickets_delivery ON wickets(delivery_id);
CREATE INDEX IF NOT EXISTS idx_powerplays_innings ON powerplays(innings_id);

"""
