import autograd.numpy as np  # type: ignore

def linear_activation(z):
    return z

def sigmoid_activation(z):
    Z = np.clip(z, -100, 100)   # to prevent under/overflow when calculating exp
    return 1.0 / (1.0 + np.exp(-Z))

def tanh_activation(z):
    return np.tanh(z)

def gaussian_activation(z):
    Z = np.clip(z, -100, 100)
    return np.exp(-Z ** 2)

def step_activation(z):
    return np.where(z > 0.0, 1.0, 0.0)

def sine_activation(z):
    return np.sin(z)

def cosine_activation(z):
    return np.cos(z)

def inverse_activation(z):
    return -z

def absolute_activation(z):
    return np.abs(z)

def relu_activation(z):
    return np.maximum(0.0, z)

def squared_activation(z):
    # Clip input to avoid overflow (±1e154 squared stays within float64 range)
    z_clipped = np.clip(z, -1e154, 1e154)
    return z_clipped ** 2

activations = {
    "linear"  : linear_activation,
    "sigmoid" : sigmoid_activation,
    "tanh"    : tanh_activation,
    "gaussian": gaussian_activation,
    "step"    : step_activation,
    "sine"    : sine_activation,
    "cosine"  : cosine_activation,
    "inverse" : inverse_activation,
    "absolute": absolute_activation,
    "relu"    : relu_activation,
    "squared" : squared_activation
    }

# 3-letter identifiers for each activation function
activation_codes = {
    "linear"  : "LIN",
    "sigmoid" : "SIG",
    "tanh"    : "TNH",
    "gaussian": "GAU",
    "step"    : "STP",
    "sine"    : "SIN",
    "cosine"  : "COS",
    "inverse" : "INV",
    "absolute": "ABS",
    "relu"    : "RLU",
    "squared" : "SQR"
    }
