import pytest

RESULTS_CSV = """heuristic,depth,seed,path_length,expanded,generated,replaced,peak_open,time_sec,termination,solvable
manhattan,4,0,4,5,10,0,6,0.001,ok,1
misplaced,4,0,4,10,20,0,9,0.002,ok,1
manhattan,4,1,4,7,14,0,8,0.003,ok,1
misplaced,4,1,4,14,28,1,12,0.004,ok,1
manhattan,6,2,6,9,18,0,10,0.005,ok,1
misplaced,6,2,,50,100,0,40,0.010,stopped,1
"""


@pytest.fixture
def results_csv(tmp_path):
    p = tmp_path / "run.csv"
    p.write_text(RESULTS_CSV)
    return p
