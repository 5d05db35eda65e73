import functools

import numpy as np
import pandas as pd
import pytest

import spike_train_analysis as sta


def test_timestamps_of_arrays():
    t = sta.timestamps([0, 1, 2])
    assert t.dtype == float
    assert np.all(t == [0.0, 1.0, 2.0])
    assert np.all(sta.timestamps([0.0, 1.0], lag=0.5) == [0.5, 1.5])
    assert np.all(sta.timestamps(3.0) == [3.0])
    with pytest.raises(ValueError):
        sta.timestamps(np.zeros((2, 2)))


def test_timestamps_of_series():
    voltage = pd.Series([0.1, -0.3, 0.2], index=[0.0, 0.1, 0.2])
    assert np.all(sta.timestamps(voltage) == [0.0, 0.1, 0.2])
    events = pd.Series([False, True, False, True], index=[0, 1, 2, 3])
    assert np.all(sta.timestamps(events) == [1.0, 3.0])
    assert np.all(sta.timestamps(events, lag=-1) == [0.0, 2.0])
    frame = pd.DataFrame({'v': [1, 2]}, index=[0.5, 0.75])
    assert np.all(sta.timestamps(frame) == [0.5, 0.75])


def test_timestamps_of_spike_time_column():
    df = pd.DataFrame({'unit': [1, 1, 1], 't': [0.2, 0.4, 0.9]})
    # a column is a Series, so its row index is what gets used
    assert np.all(sta.timestamps(df['t']) == [0.0, 1.0, 2.0])
    assert np.all(sta.timestamps(df['t'].to_numpy()) == [0.2, 0.4, 0.9])
    assert np.all(sta.trains_from_frame(df)[1] == [0.2, 0.4, 0.9])


def test_measures_accept_event_series():
    events = pd.Series([True, False, True, True],
                       index=[1.0, 1.5, 2.0, 3.0])
    spikes = [1.0, 2.0, 3.0]
    assert np.isclose(sta.sttc(events, spikes, dt=0.1), 1.0)
    assert sta.stoic(events, spikes) == 1.0


def test_trains_from_frame():
    df = pd.DataFrame({
        'unit': [1, 2, 1, 1, 2],
        'trial': [0, 0, 0, 1, 0],
        't': [0.3, 0.1, 0.2, 0.4, 0.05],
    })
    trains = sta.trains_from_frame(df)
    assert list(trains.index) == [1, 2]
    assert np.all(trains[1] == [0.2, 0.3, 0.4])
    assert np.all(trains[2] == [0.05, 0.1])

    trains = sta.trains_from_frame(df, train_cols=['unit', 'trial'])
    assert len(trains) == 3
    assert np.all(trains[(1, 0)] == [0.2, 0.3])

    with pytest.raises(ValueError):
        sta.trains_from_frame(df, t_col='time')


def test_pairwise():
    trains = {
        'a': [1.0, 2.0, 3.0],
        'b': [1.0, 2.0, 3.0],
        'c': [10.0, 20.0],
    }
    scores = sta.pairwise(trains, measure=sta.stoic)
    assert list(scores.index) == ['a', 'b', 'c']
    assert np.all(np.diag(scores) == 1.0)
    assert scores.loc['a', 'b'] == 1.0
    assert scores.loc['a', 'c'] == 0.0
    assert np.all(scores.values == scores.values.T)

    sttc = functools.partial(sta.sttc, dt=0.1)
    scores = sta.pairwise(list(trains.values()), measure=sttc,
                          symmetric=False)
    assert list(scores.columns) == [0, 1, 2]
    assert np.isclose(scores.loc[0, 1], 1.0)
    assert np.isclose(scores.loc[0, 2], scores.loc[2, 0])


def test_pairwise_of_frame_trains():
    df = pd.DataFrame({'unit': [1, 2, 1, 2], 't': [1.0, 1.0, 2.0, 2.0]})
    scores = sta.pairwise(sta.trains_from_frame(df), dt=0.1)
    assert scores.shape == (2, 2)
    assert np.all(np.isclose(scores.values, 1.0))
